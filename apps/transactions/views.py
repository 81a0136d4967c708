from rest_framework import mixins, viewsets, status, serializers
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.models import UserRole
from apps.accounts.permissions import IsMerchant, IsStudent
from apps.offers.models import OfferStatus
from apps.onboarding.models import Merchant, Student
from .models import Transaction
from .serializers import (
    TransactionSerializer,
    RecordTransactionSerializer,
    StudentLookupSerializer,
    StudentLookupResponseSerializer,
    MerchantSummarySerializer,
    TransactionFilterSerializer,
    RatingSerializer,
    SubmitRatingSerializer,
    MerchantRatingsQuerySerializer,
)
from .services import (
    find_student_by_bb_id,
    can_redeem,
    record_transaction,
    merchant_summary,
    submit_rating,
    list_merchant_ratings,
    # Exceptions
    StudentNotFoundError,
    OfferNotFoundError,
    RedemptionNotAllowedError,
    TransactionNotFoundError,
    InvalidRatingError,
    DuplicateRatingError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class TransactionPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


@extend_schema(tags=['transactions'])
class TransactionViewSet(mixins.CreateModelMixin, viewsets.ReadOnlyModelViewSet):
    """
    Confirmed in-store redemptions.

    list: Merchants see their scans, students their history, admins everything
    create: Merchant confirms a redemption
    lookup: Merchant scans a BB-ID and gets the student plus offer eligibility
    summary: Merchant dashboard totals
    rate: Student rates the merchant of a completed transaction
    ratings: Public list of a merchant's ratings
    """

    serializer_class = TransactionSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = TransactionPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_permissions(self):
        if self.action in ['create', 'lookup', 'summary']:
            return [IsAuthenticated(), IsMerchant()]
        if self.action == 'rate':
            return [IsAuthenticated(), IsStudent()]
        if self.action == 'ratings':
            return [AllowAny()]
        return [IsAuthenticated()]

    def get_queryset(self):
        user = self.request.user
        queryset = Transaction.objects.select_related('rating')

        if user.is_marketplace_admin:
            params = TransactionFilterSerializer(data=self.request.query_params)
            params.is_valid(raise_exception=True)
            filters = params.validated_data
            if 'status' in filters:
                queryset = queryset.filter(status=filters['status'])
            if 'merchant' in filters:
                queryset = queryset.filter(merchant_id=filters['merchant'])
            if 'student_bb_id' in filters:
                queryset = queryset.filter(student_bb_id__iexact=filters['student_bb_id'])
            return queryset

        if user.role == UserRole.MERCHANT:
            return queryset.filter(merchant__user=user)
        if user.role == UserRole.STUDENT:
            return queryset.filter(student__user=user)
        return queryset.none()

    def _merchant(self):
        return Merchant.objects.filter(user=self.request.user).first()

    @extend_schema(
        request=RecordTransactionSerializer,
        responses={201: TransactionSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    )
    def create(self, request, *args, **kwargs):
        serializer = RecordTransactionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        merchant = self._merchant()
        if merchant is None or not merchant.is_approved:
            return Response({'error': 'Only approved merchants can confirm redemptions'},
                            status=status.HTTP_403_FORBIDDEN)

        try:
            txn = record_transaction(
                merchant=merchant,
                scanned_by=request.user,
                **serializer.validated_data
            )
        except (StudentNotFoundError, OfferNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except RedemptionNotAllowedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(TransactionSerializer(txn).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=StudentLookupSerializer,
        responses={200: StudentLookupResponseSerializer, 404: ErrorResponseSerializer},
    )
    @action(detail=False, methods=['post'])
    def lookup(self, request):
        """Resolve a scanned BB-ID and check it against this merchant's active offers."""
        serializer = StudentLookupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        merchant = self._merchant()
        if merchant is None:
            return Response({'error': 'Complete merchant onboarding first'}, status=status.HTTP_403_FORBIDDEN)

        try:
            student = find_student_by_bb_id(serializer.validated_data['bb_id'])
        except StudentNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        offers = []
        for offer in merchant.offers.filter(status=OfferStatus.ACTIVE).select_related('merchant'):
            eligibility = can_redeem(student=student, offer=offer)
            offers.append({
                'offer': offer,
                'allowed': eligibility.allowed,
                'reason': eligibility.reason,
                'remaining_uses': eligibility.remaining_uses,
            })

        payload = {
            'bb_id': student.bb_id,
            'full_name': student.full_name,
            'college': student.college,
            'profile_image_url': student.profile_image_url,
            'is_verified': student.is_approved,
            'offers': offers,
        }
        return Response(StudentLookupResponseSerializer(payload).data)

    @extend_schema(responses={200: MerchantSummarySerializer})
    @action(detail=False, methods=['get'])
    def summary(self, request):
        merchant = self._merchant()
        if merchant is None:
            return Response({'error': 'Complete merchant onboarding first'}, status=status.HTTP_403_FORBIDDEN)

        return Response(MerchantSummarySerializer(merchant_summary(merchant)).data)

    @extend_schema(
        request=SubmitRatingSerializer,
        responses={201: RatingSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    )
    @action(detail=True, methods=['post'])
    def rate(self, request, pk=None):
        serializer = SubmitRatingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        student = Student.objects.filter(user=request.user).first()
        if student is None:
            return Response({'error': 'Complete student onboarding first'}, status=status.HTTP_403_FORBIDDEN)

        try:
            rating = submit_rating(student=student, transaction_id=pk, **serializer.validated_data)
        except TransactionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (InvalidRatingError, DuplicateRatingError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(RatingSerializer(rating).data, status=status.HTTP_201_CREATED)

    @extend_schema(parameters=[MerchantRatingsQuerySerializer], responses={200: RatingSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def ratings(self, request):
        params = MerchantRatingsQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        ratings = list_merchant_ratings(
            merchant_id=params.validated_data['merchant'],
            limit=params.validated_data['limit'],
        )
        return Response(RatingSerializer(ratings, many=True).data)
