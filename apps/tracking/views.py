import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from config.responses import success_response, error_response
from apps.onboarding.models import Student
from .permissions import IsAdminForFeed
from .serializers import (
    RedemptionRecordSerializer,
    RevealSerializer,
    FeedQuerySerializer,
    FunnelStatsSerializer,
)
from .services import (
    record_reveal,
    record_copy,
    record_click,
    record_self_reported_redemption,
    get_stats,
    list_recent,
    # Exceptions
    RecordNotFoundError,
    InvalidRevealError,
)

logger = logging.getLogger(__name__)


def _current_student_id(request):
    user = request.user
    if not (user and user.is_authenticated):
        return None
    return Student.objects.filter(user=user).values_list('id', flat=True).first()


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('status', OpenApiTypes.STR, description='REVEALED, COPIED, CLICKED or REDEEMED'),
        OpenApiParameter('offerId', OpenApiTypes.UUID),
        OpenApiParameter('brandId', OpenApiTypes.UUID),
        OpenApiParameter('limit', OpenApiTypes.INT, default=50),
    ],
    description="Live redemption feed and funnel stats for the admin dashboard.",
    tags=['tracking'],
)
@extend_schema(
    methods=['POST'],
    request=RevealSerializer,
    description="Record a coupon reveal. Opens a new funnel record.",
    tags=['tracking'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAdminForFeed])
def tracking_root(request):
    if request.method == 'GET':
        return _feed(request)
    return _reveal(request)


def _feed(request):
    query = FeedQuerySerializer(data=request.query_params)
    if not query.is_valid():
        return error_response(query.errors)
    params = query.validated_data

    records = list_recent(
        status=params.get('status'),
        offer_id=params.get('offerId'),
        brand_id=params.get('brandId'),
        limit=params.get('limit'),
    )

    return success_response({
        'redemptions': RedemptionRecordSerializer(records, many=True).data,
        'stats': FunnelStatsSerializer(get_stats()).data,
    })


def _reveal(request):
    serializer = RevealSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response(serializer.errors)

    try:
        record = record_reveal(student_id=_current_student_id(request), **serializer.validated_data)
    except InvalidRevealError as e:
        return error_response(e, status=status.HTTP_404_NOT_FOUND)
    except DatabaseError:
        logger.exception("Failed to record coupon reveal")
        return error_response('Failed to track redemption', status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return success_response(
        {'redemption_id': str(record.id), 'status': record.status},
        status=status.HTTP_201_CREATED,
    )


def _stage_event(service, record_id):
    try:
        record = service(record_id=record_id)
    except RecordNotFoundError as e:
        return error_response(e, status=status.HTTP_404_NOT_FOUND)
    except DatabaseError:
        logger.exception("Failed to update redemption record %s", record_id)
        return error_response('Failed to track redemption', status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return success_response({'redemption_id': str(record.id), 'status': record.status})


@extend_schema(request=None, description="Student copied the code.", tags=['tracking'])
@api_view(['POST'])
@permission_classes([AllowAny])
def record_copy_event(request, record_id):
    return _stage_event(record_copy, record_id)


@extend_schema(request=None, description="Student clicked through to the brand.", tags=['tracking'])
@api_view(['POST'])
@permission_classes([AllowAny])
def record_click_event(request, record_id):
    return _stage_event(record_click, record_id)


@extend_schema(request=None, description="Student reports using the code (unverified).", tags=['tracking'])
@api_view(['POST'])
@permission_classes([AllowAny])
def record_redeem_event(request, record_id):
    return _stage_event(record_self_reported_redemption, record_id)
