"""
URL configuration for the Student Deals API.

Every app mounts under ``/api/<app>/``; the scheduler hits
``/api/cron/trending/``.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenRefreshView

from config.views import health_check
from apps.trending.views import cron_refresh_trending

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/auth/', include('apps.accounts.urls')),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # API endpoints
    path('api/onboarding/', include('apps.onboarding.urls')),
    path('api/offers/', include('apps.offers.urls')),
    path('api/transactions/', include('apps.transactions.urls')),
    path('api/tracking/', include('apps.tracking.urls')),
    path('api/trending/', include('apps.trending.urls')),
    path('api/opportunities/', include('apps.opportunities.urls')),

    # Scheduled jobs
    path('api/cron/trending/', cron_refresh_trending, name='cron-trending'),
]

# Media files (development only)
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
