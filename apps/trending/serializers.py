from rest_framework import serializers

from .models import TrendingSection


class CuratedOfferSerializer(serializers.Serializer):
    offer_id = serializers.UUIDField()
    section = serializers.CharField()
    title = serializers.CharField()
    partner_name = serializers.CharField()
    logo_url = serializers.CharField(allow_blank=True)
    city = serializers.CharField(allow_blank=True)
    code = serializers.CharField(allow_blank=True)
    link = serializers.CharField(allow_blank=True)
    is_admin_pick = serializers.BooleanField()
    average_rating = serializers.DecimalField(max_digits=2, decimal_places=1, allow_null=True)
    total_ratings = serializers.IntegerField()


class DraftSessionSerializer(serializers.Serializer):
    online = CuratedOfferSerializer(many=True)
    offline = CuratedOfferSerializer(many=True)
    version = serializers.IntegerField(source='base_version')


class PublishSerializer(serializers.Serializer):
    """
    Full replacement lists. Omit a section (or send null) to leave it as is.
    """

    online = serializers.ListField(child=serializers.UUIDField(), required=False, allow_null=True)
    offline = serializers.ListField(child=serializers.UUIDField(), required=False, allow_null=True)
    version = serializers.IntegerField(min_value=0)

    def validate(self, attrs):
        for section in ('online', 'offline'):
            ids = attrs.get(section)
            if ids and len(set(ids)) != len(ids):
                raise serializers.ValidationError({section: 'Each offer may appear only once.'})
        return attrs


class HomeTrendingQuerySerializer(serializers.Serializer):
    section = serializers.ChoiceField(choices=TrendingSection.choices, default=TrendingSection.OFFLINE)
    city = serializers.CharField(required=False, allow_blank=True, default='')
    state = serializers.CharField(required=False, allow_blank=True, default='')
    limit = serializers.IntegerField(required=False, min_value=1, max_value=50)


class PickerQuerySerializer(serializers.Serializer):
    section = serializers.ChoiceField(choices=TrendingSection.choices)
    search = serializers.CharField(required=False, allow_blank=True, default='')
