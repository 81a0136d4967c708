from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'offers'

router = DefaultRouter()
router.register(r'catalog', views.OfferCatalogViewSet, basename='offer')
router.register(r'online', views.OnlineOfferCatalogViewSet, basename='online-offer')
router.register(r'mine', views.MerchantOfferViewSet, basename='merchant-offer')
router.register(r'favorites', views.FavoriteViewSet, basename='favorite')
router.register(r'admin/brands', views.OnlineBrandAdminViewSet, basename='admin-brand')
router.register(r'admin/online', views.OnlineOfferAdminViewSet, basename='admin-online-offer')

urlpatterns = [
    # GET    /api/offers/catalog/                - Active in-store offers (?search=&city=&category=)
    # GET    /api/offers/online/                 - Active online offers (?search=&city=&state=)
    # CRUD   /api/offers/mine/                   - Merchant's own offers
    # POST   /api/offers/mine/{id}/status/       - Pause / resume / expire
    # GET    /api/offers/favorites/              - Saved offers (student)
    # POST   /api/offers/favorites/              - Save an offer
    # DELETE /api/offers/favorites/{offer_id}/   - Remove a saved offer
    # POST   /api/offers/favorites/toggle/       - Flip saved state
    # GET    /api/offers/favorites/ids/          - Saved offer ids
    # CRUD   /api/offers/admin/brands/           - Online brands (admin)
    # CRUD   /api/offers/admin/online/           - Online offers (admin, ?brand=)
    path('', include(router.urls)),
]
