from rest_framework import serializers

from .models import (
    ApplicationStatus,
    ExperienceLevel,
    Opportunity,
    OpportunityApplication,
    OpportunityCategory,
    OpportunityStatus,
    OpportunityType,
    WorkMode,
)


class OpportunityCategorySerializer(serializers.ModelSerializer):

    class Meta:
        model = OpportunityCategory
        fields = ['id', 'name', 'icon', 'description', 'display_order']
        read_only_fields = fields


class OpportunitySerializer(serializers.ModelSerializer):
    """Listing with the recruiter details shown on the job board."""

    company_name = serializers.CharField(source='recruiter.company_name', read_only=True)
    recruiter_bbr_id = serializers.CharField(source='recruiter.bbr_id', read_only=True)
    category_name = serializers.CharField(source='category.name', read_only=True, default=None)

    class Meta:
        model = Opportunity
        fields = [
            'id',
            'company_name',
            'recruiter_bbr_id',
            'category',
            'category_name',
            'title',
            'description',
            'type',
            'work_mode',
            'experience_level',
            'compensation',
            'compensation_type',
            'skills_required',
            'vacancies',
            'duration',
            'terms',
            'city',
            'is_pan_india',
            'apply_method',
            'apply_link',
            'status',
            'rejection_reason',
            'total_applications',
            'expires_at',
            'created_at',
        ]
        read_only_fields = fields


class OpportunityWriteSerializer(serializers.ModelSerializer):
    """Recruiter input for posting or editing a listing."""

    category = serializers.PrimaryKeyRelatedField(
        queryset=OpportunityCategory.objects.filter(is_active=True),
        required=False,
        allow_null=True,
    )
    skills_required = serializers.ListField(
        child=serializers.CharField(max_length=50),
        max_length=20,
        required=False,
    )

    class Meta:
        model = Opportunity
        fields = [
            'category',
            'title',
            'description',
            'type',
            'work_mode',
            'experience_level',
            'compensation',
            'compensation_type',
            'skills_required',
            'vacancies',
            'duration',
            'terms',
            'city',
            'is_pan_india',
            'apply_method',
            'apply_link',
            'expires_at',
        ]


class OpportunityStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[
        OpportunityStatus.ACTIVE,
        OpportunityStatus.PAUSED,
        OpportunityStatus.CLOSED,
    ])


class ReviewOpportunitySerializer(serializers.Serializer):
    approve = serializers.BooleanField()
    reason = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')


class OpportunityFilterSerializer(serializers.Serializer):
    """Query params for the student job board."""

    category = serializers.UUIDField(required=False)
    type = serializers.ChoiceField(choices=OpportunityType.choices, required=False)
    work_mode = serializers.ChoiceField(choices=WorkMode.choices, required=False)
    experience_level = serializers.ChoiceField(choices=ExperienceLevel.choices, required=False)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    search = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')


class ApplySerializer(serializers.Serializer):
    cover_note = serializers.CharField(max_length=2000, required=False, allow_blank=True, default='')


class StudentApplicationSerializer(serializers.ModelSerializer):
    """A student's own application with the listing summary."""

    opportunity_title = serializers.CharField(source='opportunity.title', read_only=True)
    opportunity_type = serializers.CharField(source='opportunity.type', read_only=True)
    opportunity_status = serializers.CharField(source='opportunity.status', read_only=True)
    company_name = serializers.CharField(source='opportunity.recruiter.company_name', read_only=True)

    class Meta:
        model = OpportunityApplication
        fields = [
            'id',
            'opportunity',
            'opportunity_title',
            'opportunity_type',
            'opportunity_status',
            'company_name',
            'cover_note',
            'status',
            'applied_at',
        ]
        read_only_fields = fields


class ApplicantSerializer(serializers.ModelSerializer):
    """What the recruiter sees about an applicant."""

    opportunity_title = serializers.CharField(source='opportunity.title', read_only=True)
    student_bb_id = serializers.CharField(source='student.bb_id', read_only=True)
    student_name = serializers.CharField(source='student.full_name', read_only=True)
    student_email = serializers.CharField(source='student.email', read_only=True)
    college = serializers.CharField(source='student.college', read_only=True)
    city = serializers.CharField(source='student.city', read_only=True)
    profile_image_url = serializers.CharField(source='student.profile_image_url', read_only=True)

    class Meta:
        model = OpportunityApplication
        fields = [
            'id',
            'opportunity',
            'opportunity_title',
            'student_bb_id',
            'student_name',
            'student_email',
            'college',
            'city',
            'profile_image_url',
            'cover_note',
            'status',
            'recruiter_notes',
            'applied_at',
        ]
        read_only_fields = fields


class ApplicationStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=ApplicationStatus.choices)
    notes = serializers.CharField(max_length=2000, required=False, allow_blank=True)


class ApplicantFilterSerializer(serializers.Serializer):
    opportunity = serializers.UUIDField(required=False)


class AdminOpportunityFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OpportunityStatus.choices, required=False)


class RecruiterDashboardSerializer(serializers.Serializer):
    total_listings = serializers.IntegerField()
    active_listings = serializers.IntegerField()
    pending_listings = serializers.IntegerField()
    total_applications = serializers.IntegerField()
