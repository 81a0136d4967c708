from rest_framework import viewsets, status, serializers
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsMarketplaceAdmin, IsRecruiter, IsStudent
from apps.onboarding.models import Recruiter, Student
from .models import Opportunity, OpportunityCategory
from .serializers import (
    OpportunityCategorySerializer,
    OpportunitySerializer,
    OpportunityWriteSerializer,
    OpportunityStatusSerializer,
    ReviewOpportunitySerializer,
    OpportunityFilterSerializer,
    ApplySerializer,
    StudentApplicationSerializer,
    ApplicantSerializer,
    ApplicationStatusSerializer,
    ApplicantFilterSerializer,
    AdminOpportunityFilterSerializer,
    RecruiterDashboardSerializer,
)
from .services import (
    list_open_opportunities,
    post_opportunity,
    update_opportunity,
    delete_opportunity,
    set_opportunity_status,
    review_opportunity,
    recruiter_dashboard,
    apply_to_opportunity,
    list_student_applications,
    list_applicants,
    update_application_status,
    # Exceptions
    RecruiterNotApprovedError,
    InvalidOpportunityError,
    OpportunityNotFoundError,
    InvalidStatusTransitionError,
    ApplicationNotAllowedError,
    DuplicateApplicationError,
    ApplicationNotFoundError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class OpportunityPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class StudentProfileMixin:
    """Loads ``self.student`` and refuses users without a student profile."""

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.student = None
        if self.requires_student():
            self.student = Student.objects.filter(user=request.user).first()
            if self.student is None:
                self.permission_denied(request, message='Complete student onboarding first')

    def requires_student(self):
        return True


# =============================================================================
# Student job board
# =============================================================================

@extend_schema(tags=['opportunities'])
class OpportunityBoardViewSet(StudentProfileMixin, viewsets.ReadOnlyModelViewSet):
    """
    Open listings for students.

    list: Filter with ``category``, ``type``, ``work_mode``,
        ``experience_level``, ``city`` and ``search``
    retrieve: A single open listing
    categories: Active categories
    apply: Student applies in-app
    """

    serializer_class = OpportunitySerializer
    pagination_class = OpportunityPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_permissions(self):
        if self.action == 'apply':
            return [IsAuthenticated(), IsStudent()]
        return [AllowAny()]

    def requires_student(self):
        return self.action == 'apply'

    def get_queryset(self):
        if self.action != 'list':
            return list_open_opportunities()

        params = OpportunityFilterSerializer(data=self.request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data
        return list_open_opportunities(
            category_id=data.get('category'),
            type=data.get('type', ''),
            work_mode=data.get('work_mode', ''),
            experience_level=data.get('experience_level', ''),
            city=data['city'],
            search=data['search'],
        )

    @extend_schema(parameters=[OpportunityFilterSerializer])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(responses={200: OpportunityCategorySerializer(many=True)})
    @action(detail=False, methods=['get'])
    def categories(self, request):
        categories = OpportunityCategory.objects.filter(is_active=True)
        return Response(OpportunityCategorySerializer(categories, many=True).data)

    @extend_schema(
        request=ApplySerializer,
        responses={
            201: StudentApplicationSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        }
    )
    @action(detail=True, methods=['post'])
    def apply(self, request, pk=None):
        serializer = ApplySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            application = apply_to_opportunity(
                student=self.student,
                opportunity_id=pk,
                **serializer.validated_data
            )
        except OpportunityNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except ApplicationNotAllowedError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except DuplicateApplicationError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(StudentApplicationSerializer(application).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['opportunities'])
class StudentApplicationViewSet(StudentProfileMixin, viewsets.ReadOnlyModelViewSet):
    """Applications of the signed-in student, newest first."""

    serializer_class = StudentApplicationSerializer
    permission_classes = [IsAuthenticated, IsStudent]
    pagination_class = OpportunityPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        return list_student_applications(student=self.student)


# =============================================================================
# Recruiter listings and applicants
# =============================================================================

class RecruiterProfileMixin:
    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.recruiter = Recruiter.objects.filter(user=request.user).first()
        if self.recruiter is None:
            self.permission_denied(request, message='Complete recruiter onboarding first')


@extend_schema(tags=['recruiter-opportunities'])
class RecruiterOpportunityViewSet(RecruiterProfileMixin, viewsets.ModelViewSet):
    """
    Listings owned by the signed-in recruiter.

    All business logic is handled by services.
    """

    permission_classes = [IsAuthenticated, IsRecruiter]
    pagination_class = OpportunityPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        return Opportunity.objects.filter(recruiter=self.recruiter).select_related('recruiter', 'category')

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return OpportunityWriteSerializer
        return OpportunitySerializer

    @extend_schema(
        request=OpportunityWriteSerializer,
        responses={201: OpportunitySerializer, 400: ErrorResponseSerializer, 403: ErrorResponseSerializer}
    )
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            opportunity = post_opportunity(recruiter=self.recruiter, **serializer.validated_data)
        except RecruiterNotApprovedError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidOpportunityError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OpportunitySerializer(opportunity).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=OpportunityWriteSerializer, responses={200: OpportunitySerializer, 400: ErrorResponseSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        opportunity = self.get_object()
        serializer = self.get_serializer(opportunity, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            opportunity = update_opportunity(opportunity=opportunity, **serializer.validated_data)
        except InvalidOpportunityError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OpportunitySerializer(opportunity).data)

    def perform_destroy(self, instance):
        delete_opportunity(opportunity=instance)

    @extend_schema(request=OpportunityStatusSerializer, responses={200: OpportunitySerializer, 400: ErrorResponseSerializer})
    @action(detail=True, methods=['post'], url_path='status')
    def set_status(self, request, pk=None):
        """Pause, resume or close a live listing."""
        serializer = OpportunityStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            opportunity = set_opportunity_status(
                opportunity=self.get_object(),
                status=serializer.validated_data['status']
            )
        except InvalidStatusTransitionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OpportunitySerializer(opportunity).data)

    @extend_schema(responses={200: RecruiterDashboardSerializer})
    @action(detail=False, methods=['get'])
    def dashboard(self, request):
        dashboard = recruiter_dashboard(recruiter=self.recruiter)
        return Response(RecruiterDashboardSerializer(dashboard).data)


@extend_schema(tags=['recruiter-opportunities'])
class ApplicantViewSet(RecruiterProfileMixin, viewsets.ReadOnlyModelViewSet):
    """
    Applications to the recruiter's listings.

    list: ``?opportunity=`` narrows to one listing
    status: Move an applicant through the pipeline
    """

    serializer_class = ApplicantSerializer
    permission_classes = [IsAuthenticated, IsRecruiter]
    pagination_class = OpportunityPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        opportunity_id = None
        if self.action == 'list':
            params = ApplicantFilterSerializer(data=self.request.query_params)
            params.is_valid(raise_exception=True)
            opportunity_id = params.validated_data.get('opportunity')
        return list_applicants(recruiter=self.recruiter, opportunity_id=opportunity_id)

    @extend_schema(parameters=[ApplicantFilterSerializer])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(
        request=ApplicationStatusSerializer,
        responses={200: ApplicantSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer}
    )
    @action(detail=True, methods=['post'], url_path='status')
    def set_status(self, request, pk=None):
        serializer = ApplicationStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            application = update_application_status(
                recruiter=self.recruiter,
                application_id=pk,
                **serializer.validated_data
            )
        except ApplicationNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except ApplicationNotAllowedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ApplicantSerializer(application).data)


# =============================================================================
# Admin review
# =============================================================================

@extend_schema(tags=['opportunities-admin'])
class OpportunityAdminViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Every listing for moderation; ``?status=pending_review`` is the queue.
    """

    serializer_class = OpportunitySerializer
    permission_classes = [IsAuthenticated, IsMarketplaceAdmin]
    pagination_class = OpportunityPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        queryset = Opportunity.objects.select_related('recruiter', 'category')
        if self.action == 'list':
            params = AdminOpportunityFilterSerializer(data=self.request.query_params)
            params.is_valid(raise_exception=True)
            if 'status' in params.validated_data:
                queryset = queryset.filter(status=params.validated_data['status'])
        return queryset

    @extend_schema(parameters=[AdminOpportunityFilterSerializer])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(
        request=ReviewOpportunitySerializer,
        responses={200: OpportunitySerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer}
    )
    @action(detail=True, methods=['post'])
    def review(self, request, pk=None):
        """Approve or reject a listing waiting for review."""
        serializer = ReviewOpportunitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            opportunity = review_opportunity(opportunity_id=pk, **serializer.validated_data)
        except OpportunityNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidStatusTransitionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OpportunitySerializer(opportunity).data)
