import logging

from django.conf import settings
from django.db import DatabaseError
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from config.responses import success_response, error_response
from apps.accounts.permissions import IsMarketplaceAdmin
from apps.offers.services import list_active_offers, list_active_online_offers
from .models import TrendingSection
from .serializers import (
    CuratedOfferSerializer,
    DraftSessionSerializer,
    PublishSerializer,
    HomeTrendingQuerySerializer,
    PickerQuerySerializer,
)
from .services import (
    CuratedOffer,
    load_current,
    publish,
    get_home_trending,
    refresh_trending_scores,
    # Exceptions
    StaleDraftError,
    InvalidCurationError,
)

logger = logging.getLogger(__name__)

PICKER_LIMIT = 50


@extend_schema(
    methods=['GET'],
    responses={200: DraftSessionSerializer},
    description="Current curated lists and their version.",
    tags=['trending'],
)
@extend_schema(
    methods=['PUT'],
    request=PublishSerializer,
    responses={200: DraftSessionSerializer},
    description="Publish both lists atomically. 409 if someone published since `version`.",
    tags=['trending'],
)
@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated, IsMarketplaceAdmin])
def trending_root(request):
    if request.method == 'GET':
        return success_response(DraftSessionSerializer(load_current()).data)

    serializer = PublishSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response(serializer.errors)
    data = serializer.validated_data

    try:
        draft = publish(
            online=data.get('online'),
            offline=data.get('offline'),
            base_version=data['version'],
            published_by=request.user,
        )
    except StaleDraftError as e:
        return error_response(e, status=status.HTTP_409_CONFLICT)
    except InvalidCurationError as e:
        return error_response(e)
    except DatabaseError:
        logger.exception("Failed to publish trending lists")
        return error_response('Failed to publish trending offers', status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return success_response(DraftSessionSerializer(draft).data)


@extend_schema(
    parameters=[
        OpenApiParameter('section', OpenApiTypes.STR, description="'online' or 'offline'", default='offline'),
        OpenApiParameter('city', OpenApiTypes.STR),
        OpenApiParameter('state', OpenApiTypes.STR),
        OpenApiParameter('limit', OpenApiTypes.INT),
    ],
    responses={200: CuratedOfferSerializer(many=True)},
    description="Trending list for the student home screen: admin picks first, then top offers.",
    tags=['trending'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def home_trending(request):
    query = HomeTrendingQuerySerializer(data=request.query_params)
    if not query.is_valid():
        return error_response(query.errors)
    params = query.validated_data

    offers = get_home_trending(
        section=params['section'],
        limit=params.get('limit'),
        city=params['city'],
        state=params['state'],
    )
    return success_response(CuratedOfferSerializer(offers, many=True).data)


@extend_schema(
    parameters=[
        OpenApiParameter('section', OpenApiTypes.STR, required=True),
        OpenApiParameter('search', OpenApiTypes.STR),
    ],
    responses={200: CuratedOfferSerializer(many=True)},
    description="Active offers the curator can add to a section.",
    tags=['trending'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsMarketplaceAdmin])
def offer_picker(request):
    query = PickerQuerySerializer(data=request.query_params)
    if not query.is_valid():
        return error_response(query.errors)
    params = query.validated_data

    if params['section'] == TrendingSection.OFFLINE:
        offers = [
            CuratedOffer.from_offer(offer, is_admin_pick=False)
            for offer in list_active_offers(search=params['search']).order_by('-created_at')[:PICKER_LIMIT]
        ]
    else:
        offers = [
            CuratedOffer.from_online_offer(offer, is_admin_pick=False)
            for offer in list_active_online_offers(search=params['search'])[:PICKER_LIMIT]
        ]

    return success_response(CuratedOfferSerializer(offers, many=True).data)


def _cron_authorized(request) -> bool:
    secret = settings.CRON_SECRET
    if not secret:
        return True
    return request.headers.get('Authorization', '') == f'Bearer {secret}'


@extend_schema(
    request=None,
    description="Recompute merchant trending scores from the last 24h of transactions. Called by the scheduler.",
    tags=['trending'],
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def cron_refresh_trending(request):
    if not _cron_authorized(request):
        return Response({'error': 'Unauthorized'}, status=status.HTTP_401_UNAUTHORIZED)

    logger.info("Refreshing trending offers")
    try:
        refresh_trending_scores()
    except DatabaseError as e:
        logger.exception("Error refreshing trending offers")
        return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({
        'success': True,
        'message': 'Trending offers refreshed successfully based on 24h transactions',
    })
