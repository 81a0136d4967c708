from rest_framework import serializers

from apps.offers.serializers import OfferSerializer
from .models import PaymentMethod, Rating, Transaction, TransactionStatus


class TransactionSerializer(serializers.ModelSerializer):
    rating = serializers.IntegerField(source='rating.stars', read_only=True, default=None)

    class Meta:
        model = Transaction
        fields = [
            'id',
            'student',
            'merchant',
            'offer',
            'student_bb_id',
            'student_name',
            'merchant_bbm_id',
            'merchant_name',
            'offer_title',
            'original_amount',
            'discount_amount',
            'final_amount',
            'payment_method',
            'status',
            'scanned_at',
            'rating',
        ]
        read_only_fields = fields


class RecordTransactionSerializer(serializers.Serializer):
    """Merchant confirmation of a counter redemption."""

    student_bb_id = serializers.CharField(max_length=20)
    offer_id = serializers.UUIDField()
    original_amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=0,
        required=False,
        allow_null=True,
        default=None,
    )
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices, default=PaymentMethod.CASH)


class StudentLookupSerializer(serializers.Serializer):
    bb_id = serializers.CharField(max_length=20)


class OfferEligibilitySerializer(serializers.Serializer):
    offer = OfferSerializer()
    allowed = serializers.BooleanField()
    reason = serializers.CharField(allow_blank=True)
    remaining_uses = serializers.IntegerField(allow_null=True)


class StudentLookupResponseSerializer(serializers.Serializer):
    """What the merchant sees after scanning a pass."""

    bb_id = serializers.CharField()
    full_name = serializers.CharField()
    college = serializers.CharField()
    profile_image_url = serializers.CharField(allow_blank=True)
    is_verified = serializers.BooleanField()
    offers = OfferEligibilitySerializer(many=True)


class MerchantSummarySerializer(serializers.Serializer):
    total_transactions = serializers.IntegerField()
    unique_students = serializers.IntegerField()
    total_discount_given = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
    today_transactions = serializers.IntegerField()


class TransactionFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=TransactionStatus.choices, required=False)
    merchant = serializers.UUIDField(required=False)
    student_bb_id = serializers.CharField(max_length=20, required=False)


class RatingSerializer(serializers.ModelSerializer):
    student_name = serializers.CharField(source='student.full_name', read_only=True, default=None)

    class Meta:
        model = Rating
        fields = ['id', 'transaction', 'merchant', 'student_name', 'stars', 'review_text', 'created_at']
        read_only_fields = fields


class SubmitRatingSerializer(serializers.Serializer):
    stars = serializers.IntegerField(min_value=1, max_value=5)
    review_text = serializers.CharField(max_length=1000, required=False, allow_blank=True, default='')


class MerchantRatingsQuerySerializer(serializers.Serializer):
    merchant = serializers.UUIDField()
    limit = serializers.IntegerField(min_value=1, max_value=100, required=False, default=20)
