from django.db.models import Q
from django.http import HttpResponse
from rest_framework import viewsets, status, serializers
from rest_framework.decorators import action, api_view, parser_classes, permission_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiTypes

from apps.accounts.permissions import IsMarketplaceAdmin, IsMerchant, IsRecruiter, IsStudent
from .models import Merchant, Recruiter, Student
from .serializers import (
    StudentSerializer,
    MerchantSerializer,
    RecruiterSerializer,
    StudentApplicationSerializer,
    MerchantApplicationSerializer,
    RecruiterApplicationSerializer,
    RejectApplicationSerializer,
    ApplicationFilterSerializer,
)
from .services import (
    submit_student_application,
    submit_merchant_application,
    submit_recruiter_application,
    generate_student_pass_qr,
    approve,
    reject,
    suspend,
    reinstate,
    # Exceptions
    ApplicationExistsError,
    InvalidStatusTransitionError,
    UploadError,
    StudentPassUnavailableError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class MyProfilesResponseSerializer(serializers.Serializer):
    student = StudentSerializer(allow_null=True)
    merchant = MerchantSerializer(allow_null=True)
    recruiter = RecruiterSerializer(allow_null=True)


# =============================================================================
# Applicant endpoints
# =============================================================================

def _apply(request, input_serializer_class, submit, output_serializer_class):
    serializer = input_serializer_class(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        profile = submit(user=request.user, **serializer.validated_data)
    except ApplicationExistsError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
    except UploadError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(output_serializer_class(profile).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=StudentApplicationSerializer,
    responses={201: StudentSerializer, 400: ErrorResponseSerializer, 409: ErrorResponseSerializer},
    description="Submit (or resubmit after rejection) student verification.",
    tags=['onboarding'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsStudent])
@parser_classes([MultiPartParser, FormParser, JSONParser])
def apply_student(request):
    return _apply(request, StudentApplicationSerializer, submit_student_application, StudentSerializer)


@extend_schema(
    request=MerchantApplicationSerializer,
    responses={201: MerchantSerializer, 400: ErrorResponseSerializer, 409: ErrorResponseSerializer},
    description="Submit (or resubmit after rejection) a merchant application.",
    tags=['onboarding'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsMerchant])
@parser_classes([MultiPartParser, FormParser, JSONParser])
def apply_merchant(request):
    return _apply(request, MerchantApplicationSerializer, submit_merchant_application, MerchantSerializer)


@extend_schema(
    request=RecruiterApplicationSerializer,
    responses={201: RecruiterSerializer, 400: ErrorResponseSerializer, 409: ErrorResponseSerializer},
    description="Submit (or resubmit after rejection) a recruiter application.",
    tags=['onboarding'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsRecruiter])
def apply_recruiter(request):
    return _apply(request, RecruiterApplicationSerializer, submit_recruiter_application, RecruiterSerializer)


@extend_schema(
    responses={200: MyProfilesResponseSerializer},
    description="Application status of every profile the current user holds.",
    tags=['onboarding'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_profiles(request):
    user = request.user
    student = Student.objects.filter(user=user).first()
    merchant = Merchant.objects.filter(user=user).first()
    recruiter = Recruiter.objects.filter(user=user).first()

    return Response({
        'student': StudentSerializer(student).data if student else None,
        'merchant': MerchantSerializer(merchant).data if merchant else None,
        'recruiter': RecruiterSerializer(recruiter).data if recruiter else None,
    })


@extend_schema(
    responses={(200, 'image/png'): OpenApiTypes.BINARY, 403: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Student pass QR code (PNG) encoding the student's BB-ID.",
    tags=['onboarding'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStudent])
def student_pass(request):
    student = Student.objects.filter(user=request.user).first()
    if student is None:
        return Response({'error': 'No student profile'}, status=status.HTTP_404_NOT_FOUND)

    try:
        png = generate_student_pass_qr(student)
    except StudentPassUnavailableError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return HttpResponse(png, content_type='image/png')


# =============================================================================
# Admin review queues
# =============================================================================

class ReviewPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ApplicationReviewViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Admin review queue for one profile kind.

    list: Applications, filterable by ``status`` and ``search``
    retrieve: A single application
    approve / reject / suspend / reinstate: Status transitions
    """

    permission_classes = [IsAuthenticated, IsMarketplaceAdmin]
    pagination_class = ReviewPagination
    search_fields = ()

    def get_queryset(self):
        queryset = self.queryset.select_related('user')

        params = ApplicationFilterSerializer(data=self.request.query_params)
        params.is_valid(raise_exception=True)

        status_filter = params.validated_data.get('status')
        if status_filter:
            queryset = queryset.filter(status=status_filter)

        search = params.validated_data.get('search', '').strip()
        if search:
            query = Q()
            for field in self.search_fields:
                query |= Q(**{f'{field}__icontains': search})
            queryset = queryset.filter(query)

        return queryset

    def _respond(self, transition, *args):
        profile = self.get_object()
        try:
            profile = transition(profile, *args)
        except InvalidStatusTransitionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(self.get_serializer(profile).data)

    @extend_schema(request=None)
    @action(detail=True, methods=['post'])
    def approve(self, request, pk=None):
        """Approve; assigns the identifier on first approval."""
        return self._respond(approve)

    @extend_schema(request=RejectApplicationSerializer)
    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        serializer = RejectApplicationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self._respond(reject, serializer.validated_data['reason'])

    @extend_schema(request=None)
    @action(detail=True, methods=['post'])
    def suspend(self, request, pk=None):
        return self._respond(suspend)

    @extend_schema(request=None)
    @action(detail=True, methods=['post'])
    def reinstate(self, request, pk=None):
        return self._respond(reinstate)


@extend_schema(tags=['onboarding-admin'])
class StudentReviewViewSet(ApplicationReviewViewSet):
    queryset = Student.objects.all()
    serializer_class = StudentSerializer
    search_fields = ('full_name', 'email', 'college', 'bb_id')


@extend_schema(tags=['onboarding-admin'])
class MerchantReviewViewSet(ApplicationReviewViewSet):
    queryset = Merchant.objects.all()
    serializer_class = MerchantSerializer
    search_fields = ('business_name', 'owner_name', 'email', 'bbm_id', 'city')


@extend_schema(tags=['onboarding-admin'])
class RecruiterReviewViewSet(ApplicationReviewViewSet):
    queryset = Recruiter.objects.all()
    serializer_class = RecruiterSerializer
    search_fields = ('company_name', 'contact_name', 'email', 'bbr_id')
