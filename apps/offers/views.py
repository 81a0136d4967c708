from rest_framework import viewsets, status, serializers
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsMarketplaceAdmin, IsMerchant, IsStudent
from apps.onboarding.models import Merchant, OnlineBrand, Student
from apps.onboarding.serializers import OnlineBrandSerializer
from .models import Offer, OnlineOffer
from .serializers import (
    OfferSerializer,
    OfferWriteSerializer,
    OfferStatusSerializer,
    OnlineOfferSerializer,
    CatalogQuerySerializer,
    FavoriteSerializer,
    FavoriteOfferSerializer,
)
from .services import (
    list_active_offers,
    list_active_online_offers,
    filter_visible,
    create_offer,
    update_offer,
    set_offer_status,
    add_favorite,
    remove_favorite,
    toggle_favorite,
    list_favorites,
    favorite_offer_ids,
    # Exceptions
    MerchantNotApprovedError,
    InvalidOfferError,
    OfferNotFoundError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class OfferPagination(PageNumberPagination):
    """Custom pagination for offer lists."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


def _catalog_params(request):
    params = CatalogQuerySerializer(data=request.query_params)
    params.is_valid(raise_exception=True)
    return params.validated_data


# =============================================================================
# Student catalog
# =============================================================================

@extend_schema(tags=['offers'], parameters=[CatalogQuerySerializer])
class OfferCatalogViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Active in-store offers of approved merchants.

    list: Filter with ``search``, ``city`` and ``category``
    retrieve: A single active offer
    """

    serializer_class = OfferSerializer
    permission_classes = [AllowAny]
    pagination_class = OfferPagination

    def get_queryset(self):
        params = _catalog_params(self.request)
        return list_active_offers(
            search=params['search'],
            city=params['city'],
            category=params['category'],
        )


@extend_schema(tags=['offers'], parameters=[CatalogQuerySerializer])
class OnlineOfferCatalogViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Active online offers, narrowed to the student's ``city`` / ``state``.
    """

    serializer_class = OnlineOfferSerializer
    permission_classes = [AllowAny]
    pagination_class = OfferPagination

    def get_queryset(self):
        return list_active_online_offers(search=_catalog_params(self.request)['search'])

    def list(self, request, *args, **kwargs):
        params = _catalog_params(request)
        offers = filter_visible(self.get_queryset(), city=params['city'], state=params['state'])

        page = self.paginate_queryset(offers)
        serializer = self.get_serializer(page, many=True)
        return self.get_paginated_response(serializer.data)


# =============================================================================
# Merchant offers
# =============================================================================

@extend_schema(tags=['merchant-offers'])
class MerchantOfferViewSet(viewsets.ModelViewSet):
    """
    Offers owned by the signed-in merchant.

    All business logic is handled by services.
    """

    permission_classes = [IsAuthenticated, IsMerchant]
    pagination_class = OfferPagination

    def get_queryset(self):
        return Offer.objects.filter(merchant__user=self.request.user).select_related('merchant')

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return OfferWriteSerializer
        return OfferSerializer

    def _merchant(self):
        return Merchant.objects.filter(user=self.request.user).first()

    @extend_schema(request=OfferWriteSerializer, responses={201: OfferSerializer, 400: ErrorResponseSerializer})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        merchant = self._merchant()
        if merchant is None:
            return Response({'error': 'Complete merchant onboarding first'}, status=status.HTTP_403_FORBIDDEN)

        try:
            offer = create_offer(merchant=merchant, **serializer.validated_data)
        except MerchantNotApprovedError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidOfferError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OfferSerializer(offer).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=OfferWriteSerializer, responses={200: OfferSerializer, 400: ErrorResponseSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        offer = self.get_object()
        serializer = self.get_serializer(offer, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            offer = update_offer(offer=offer, **serializer.validated_data)
        except InvalidOfferError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OfferSerializer(offer).data)

    @extend_schema(request=OfferStatusSerializer, responses={200: OfferSerializer})
    @action(detail=True, methods=['post'], url_path='status')
    def set_status(self, request, pk=None):
        """Pause, resume or expire an offer."""
        serializer = OfferStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        offer = set_offer_status(offer=self.get_object(), status=serializer.validated_data['status'])
        return Response(OfferSerializer(offer).data)


# =============================================================================
# Student favorites
# =============================================================================

@extend_schema(tags=['favorites'])
class FavoriteViewSet(viewsets.ViewSet):
    """
    Offers the signed-in student saved.

    list: Saved offers, newest first
    create: Save an offer (200 if it was already saved)
    destroy: Remove an offer by its id
    toggle: Flip the saved state
    ids: Saved offer ids for badge rendering
    """

    permission_classes = [IsAuthenticated, IsStudent]
    pagination_class = OfferPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.student = Student.objects.filter(user=request.user).first()
        if self.student is None:
            self.permission_denied(request, message='Complete student onboarding first')

    @extend_schema(responses={200: FavoriteSerializer(many=True)})
    def list(self, request):
        paginator = self.pagination_class()
        page = paginator.paginate_queryset(list_favorites(student=self.student), request, view=self)
        return paginator.get_paginated_response(FavoriteSerializer(page, many=True).data)

    @extend_schema(request=FavoriteOfferSerializer, responses={201: FavoriteSerializer, 404: ErrorResponseSerializer})
    def create(self, request):
        serializer = FavoriteOfferSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            favorite, created = add_favorite(student=self.student, **serializer.validated_data)
        except OfferNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(
            FavoriteSerializer(favorite).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )

    @extend_schema(responses={204: None, 404: ErrorResponseSerializer})
    def destroy(self, request, pk=None):
        if not remove_favorite(student=self.student, offer_id=pk):
            return Response({'error': 'Offer is not in your favorites'}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=FavoriteOfferSerializer)
    @action(detail=False, methods=['post'])
    def toggle(self, request):
        serializer = FavoriteOfferSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            is_favorite = toggle_favorite(student=self.student, **serializer.validated_data)
        except OfferNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({'is_favorite': is_favorite})

    @action(detail=False, methods=['get'])
    def ids(self, request):
        return Response({'offer_ids': favorite_offer_ids(student=self.student)})


# =============================================================================
# Admin: online brands and their offers
# =============================================================================

@extend_schema(tags=['offers-admin'])
class OnlineBrandAdminViewSet(viewsets.ModelViewSet):
    queryset = OnlineBrand.objects.all()
    serializer_class = OnlineBrandSerializer
    permission_classes = [IsAuthenticated, IsMarketplaceAdmin]
    pagination_class = OfferPagination


@extend_schema(tags=['offers-admin'])
class OnlineOfferAdminViewSet(viewsets.ModelViewSet):
    """All online offers including inactive ones; ``?brand=`` narrows to one brand."""

    serializer_class = OnlineOfferSerializer
    permission_classes = [IsAuthenticated, IsMarketplaceAdmin]
    pagination_class = OfferPagination

    def get_queryset(self):
        queryset = OnlineOffer.objects.select_related('brand')
        brand_id = self.request.query_params.get('brand')
        if brand_id:
            queryset = queryset.filter(brand_id=brand_id)
        return queryset
