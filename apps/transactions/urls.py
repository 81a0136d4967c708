from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'transactions'

router = DefaultRouter()
router.register(r'', views.TransactionViewSet, basename='transaction')

urlpatterns = [
    # GET  /api/transactions/           - List (scoped by role)
    # POST /api/transactions/           - Confirm a redemption (merchant)
    # GET  /api/transactions/{id}/      - Detail
    # POST /api/transactions/lookup/    - Resolve scanned BB-ID (merchant)
    # GET  /api/transactions/summary/   - Dashboard totals (merchant)
    # POST /api/transactions/{id}/rate/ - Rate the merchant (student)
    # GET  /api/transactions/ratings/   - Merchant ratings (?merchant=)
    path('', include(router.urls)),
]
