from rest_framework import serializers

from .models import DeviceType, RedemptionRecord, RedemptionStatus


class RedemptionRecordSerializer(serializers.ModelSerializer):
    offer_title = serializers.CharField(source='offer.title', read_only=True)
    brand_name = serializers.CharField(source='brand.name', read_only=True, default=None)
    student_bb_id = serializers.CharField(source='student.bb_id', read_only=True, default=None)
    student_name = serializers.CharField(source='student.full_name', read_only=True, default=None)

    class Meta:
        model = RedemptionRecord
        fields = [
            'id',
            'student',
            'student_bb_id',
            'student_name',
            'offer',
            'offer_title',
            'brand',
            'brand_name',
            'code',
            'status',
            'device_type',
            'source',
            'verified',
            'revealed_at',
            'copied_at',
            'clicked_through_at',
            'redeemed_at',
        ]
        read_only_fields = fields


class RevealSerializer(serializers.Serializer):
    offer_id = serializers.UUIDField()
    brand_id = serializers.UUIDField(required=False, allow_null=True, default=None)
    code = serializers.CharField(max_length=100, required=False, allow_blank=True, default=None)
    device_type = serializers.ChoiceField(choices=DeviceType.choices, default=DeviceType.MOBILE)
    source = serializers.CharField(max_length=50, required=False, default='APP')


class FeedQuerySerializer(serializers.Serializer):
    """Query params of the admin feed, named as the dashboard sends them."""

    status = serializers.ChoiceField(choices=RedemptionStatus.choices, required=False)
    offerId = serializers.UUIDField(required=False)
    brandId = serializers.UUIDField(required=False)
    limit = serializers.IntegerField(required=False)


class FunnelStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    revealed = serializers.IntegerField()
    copied = serializers.IntegerField()
    clicked = serializers.IntegerField()
    redeemed = serializers.IntegerField()
    by_status = serializers.DictField(child=serializers.IntegerField())
    conversion_rate = serializers.FloatField()
