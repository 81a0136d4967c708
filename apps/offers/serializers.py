from rest_framework import serializers

from .models import Favorite, LocationScope, Offer, OfferStatus, OnlineOffer


class OfferSerializer(serializers.ModelSerializer):
    """In-store offer with the merchant details students need."""

    merchant_id = serializers.UUIDField(source='merchant.id', read_only=True)
    merchant_name = serializers.CharField(source='merchant.business_name', read_only=True)
    merchant_bbm_id = serializers.CharField(source='merchant.bbm_id', read_only=True)
    merchant_city = serializers.CharField(source='merchant.city', read_only=True)
    merchant_logo_url = serializers.CharField(source='merchant.logo_url', read_only=True)
    merchant_rating = serializers.DecimalField(source='merchant.average_rating', max_digits=2, decimal_places=1, read_only=True)
    merchant_total_ratings = serializers.IntegerField(source='merchant.total_ratings', read_only=True)

    class Meta:
        model = Offer
        fields = [
            'id',
            'merchant_id',
            'merchant_name',
            'merchant_bbm_id',
            'merchant_city',
            'merchant_logo_url',
            'merchant_rating',
            'merchant_total_ratings',
            'title',
            'description',
            'type',
            'original_price',
            'discount_value',
            'discount_amount',
            'final_price',
            'max_discount',
            'min_order_value',
            'free_item_name',
            'terms',
            'max_uses_per_student',
            'valid_from',
            'valid_until',
            'status',
            'total_redemptions',
            'created_at',
        ]
        read_only_fields = fields


class OfferWriteSerializer(serializers.ModelSerializer):
    """Merchant input for creating or editing an offer."""

    terms = serializers.ListField(
        child=serializers.CharField(max_length=200),
        max_length=6,
        required=False,
    )

    class Meta:
        model = Offer
        fields = [
            'title',
            'description',
            'type',
            'original_price',
            'discount_value',
            'max_discount',
            'min_order_value',
            'free_item_name',
            'terms',
            'max_uses_per_student',
            'valid_from',
            'valid_until',
        ]
        extra_kwargs = {
            'max_uses_per_student': {'min_value': 1},
        }


class OfferStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OfferStatus.choices)


class OnlineOfferSerializer(serializers.ModelSerializer):
    brand_name = serializers.CharField(source='brand.name', read_only=True)
    brand_logo_url = serializers.CharField(source='brand.logo_url', read_only=True)
    location_values = serializers.ListField(
        child=serializers.CharField(max_length=100),
        required=False,
    )

    class Meta:
        model = OnlineOffer
        fields = [
            'id',
            'brand',
            'brand_name',
            'brand_logo_url',
            'title',
            'description',
            'code',
            'link',
            'valid_until',
            'location_scope',
            'location_values',
            'is_active',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']

    def validate(self, attrs):
        scope = attrs.get('location_scope', getattr(self.instance, 'location_scope', LocationScope.PAN_INDIA))
        values = attrs.get('location_values', getattr(self.instance, 'location_values', []))

        if scope == LocationScope.PAN_INDIA:
            attrs['location_values'] = []
        elif not values:
            raise serializers.ValidationError({
                'location_values': 'Pick at least one state or city for a restricted offer.'
            })

        code = attrs.get('code', getattr(self.instance, 'code', ''))
        link = attrs.get('link', getattr(self.instance, 'link', ''))
        if not code and not link:
            raise serializers.ValidationError('An online offer needs a code or a link.')

        return attrs


class CatalogQuerySerializer(serializers.Serializer):
    """Query params for student catalog browsing."""

    search = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    city = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    state = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    category = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')


class FavoriteSerializer(serializers.ModelSerializer):
    offer = OfferSerializer(read_only=True)

    class Meta:
        model = Favorite
        fields = ['id', 'offer', 'created_at']
        read_only_fields = fields


class FavoriteOfferSerializer(serializers.Serializer):
    offer_id = serializers.UUIDField()
