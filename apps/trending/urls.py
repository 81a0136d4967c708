from django.urls import path
from . import views

app_name = 'trending'

urlpatterns = [
    # GET /api/trending/          - Current curated lists (admin)
    # PUT /api/trending/          - Publish (admin)
    path('', views.trending_root, name='trending'),
    path('home/', views.home_trending, name='home'),
    path('catalog/', views.offer_picker, name='catalog'),
]
