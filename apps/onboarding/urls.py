from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'onboarding'

# Router for admin review queues
router = DefaultRouter()
router.register(r'admin/students', views.StudentReviewViewSet, basename='admin-student')
router.register(r'admin/merchants', views.MerchantReviewViewSet, basename='admin-merchant')
router.register(r'admin/recruiters', views.RecruiterReviewViewSet, basename='admin-recruiter')

urlpatterns = [
    # Applicant endpoints
    path('students/apply/', views.apply_student, name='apply-student'),
    path('merchants/apply/', views.apply_merchant, name='apply-merchant'),
    path('recruiters/apply/', views.apply_recruiter, name='apply-recruiter'),
    path('me/', views.my_profiles, name='my-profiles'),
    path('students/me/pass/', views.student_pass, name='student-pass'),

    # Review queue routes
    # GET  /api/onboarding/admin/{kind}/                  - List (?status=&search=)
    # GET  /api/onboarding/admin/{kind}/{id}/             - Detail
    # POST /api/onboarding/admin/{kind}/{id}/approve/     - Approve (assigns ID)
    # POST /api/onboarding/admin/{kind}/{id}/reject/      - Reject with reason
    # POST /api/onboarding/admin/{kind}/{id}/suspend/     - Suspend
    # POST /api/onboarding/admin/{kind}/{id}/reinstate/   - Reinstate
    path('', include(router.urls)),
]
