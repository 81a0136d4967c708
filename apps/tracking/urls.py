from django.urls import path
from . import views

app_name = 'tracking'

urlpatterns = [
    # GET  /api/tracking/               - Admin feed + stats
    # POST /api/tracking/               - Reveal
    path('', views.tracking_root, name='tracking'),
    path('<uuid:record_id>/copy/', views.record_copy_event, name='copy'),
    path('<uuid:record_id>/click/', views.record_click_event, name='click'),
    path('<uuid:record_id>/redeem/', views.record_redeem_event, name='redeem'),
]
