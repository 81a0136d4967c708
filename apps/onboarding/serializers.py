from rest_framework import serializers

from .models import ApprovalStatus, Merchant, OnlineBrand, Recruiter, Student


class StudentSerializer(serializers.ModelSerializer):
    """Student profile as seen by the student and by admins."""

    class Meta:
        model = Student
        fields = [
            'id',
            'bb_id',
            'full_name',
            'email',
            'phone',
            'college',
            'city',
            'state',
            'profile_image_url',
            'status',
            'total_savings',
            'total_redemptions',
            'approved_at',
            'rejection_reason',
            'created_at',
        ]
        read_only_fields = fields


class MerchantSerializer(serializers.ModelSerializer):

    class Meta:
        model = Merchant
        fields = [
            'id',
            'bbm_id',
            'business_name',
            'owner_name',
            'email',
            'phone',
            'category',
            'description',
            'address',
            'city',
            'state',
            'pin_code',
            'latitude',
            'longitude',
            'logo_url',
            'cover_photo_url',
            'is_online_store',
            'status',
            'trending_score',
            'is_trending_override',
            'average_rating',
            'total_ratings',
            'approved_at',
            'rejection_reason',
            'created_at',
        ]
        read_only_fields = fields


class RecruiterSerializer(serializers.ModelSerializer):

    class Meta:
        model = Recruiter
        fields = [
            'id',
            'bbr_id',
            'company_name',
            'contact_name',
            'email',
            'phone',
            'website',
            'city',
            'status',
            'approved_at',
            'rejection_reason',
            'created_at',
        ]
        read_only_fields = fields


class OnlineBrandSerializer(serializers.ModelSerializer):

    class Meta:
        model = OnlineBrand
        fields = [
            'id',
            'name',
            'slug',
            'website',
            'logo_url',
            'category',
            'description',
            'is_active',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']


# =============================================================================
# Application input
# =============================================================================

class StudentApplicationSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=150)
    college = serializers.CharField(max_length=200)
    city = serializers.CharField(max_length=100)
    state = serializers.CharField(max_length=100)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    profile_image = serializers.FileField(required=False, allow_null=True, default=None)


class MerchantApplicationSerializer(serializers.Serializer):
    business_name = serializers.CharField(max_length=200)
    owner_name = serializers.CharField(max_length=150)
    phone = serializers.CharField(max_length=20)
    category = serializers.CharField(max_length=50)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    address = serializers.CharField(max_length=300)
    city = serializers.CharField(max_length=100)
    state = serializers.CharField(max_length=100)
    pin_code = serializers.RegexField(
        regex=r'^\d{6}$',
        required=False,
        allow_blank=True,
        default='',
        error_messages={'invalid': 'PIN code must be 6 digits.'},
    )
    latitude = serializers.DecimalField(
        max_digits=9, decimal_places=6, required=False, allow_null=True, default=None,
        min_value=-90, max_value=90,
    )
    longitude = serializers.DecimalField(
        max_digits=9, decimal_places=6, required=False, allow_null=True, default=None,
        min_value=-180, max_value=180,
    )
    is_online_store = serializers.BooleanField(required=False, default=False)
    logo = serializers.FileField(required=False, allow_null=True, default=None)
    cover_photo = serializers.FileField(required=False, allow_null=True, default=None)


class RecruiterApplicationSerializer(serializers.Serializer):
    company_name = serializers.CharField(max_length=200)
    contact_name = serializers.CharField(max_length=150)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    website = serializers.URLField(max_length=300, required=False, allow_blank=True, default='')
    city = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')


# =============================================================================
# Admin review input
# =============================================================================

class RejectApplicationSerializer(serializers.Serializer):
    reason = serializers.CharField(max_length=1000)


class ApplicationFilterSerializer(serializers.Serializer):
    """Query params for the admin review queues."""

    status = serializers.ChoiceField(choices=ApprovalStatus.choices, required=False)
    search = serializers.CharField(max_length=100, required=False, allow_blank=True)
