from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'opportunities'

router = DefaultRouter()
router.register(r'applications', views.StudentApplicationViewSet, basename='application')
router.register(r'mine', views.RecruiterOpportunityViewSet, basename='recruiter-opportunity')
router.register(r'applicants', views.ApplicantViewSet, basename='applicant')
router.register(r'admin', views.OpportunityAdminViewSet, basename='admin-opportunity')
router.register(r'', views.OpportunityBoardViewSet, basename='opportunity')

urlpatterns = [
    # GET    /api/opportunities/                       - Open listings (?category=&type=&work_mode=&city=&search=)
    # GET    /api/opportunities/{id}/                  - Listing detail
    # GET    /api/opportunities/categories/            - Active categories
    # POST   /api/opportunities/{id}/apply/            - Apply in-app (student)
    # GET    /api/opportunities/applications/          - Student's own applications
    # CRUD   /api/opportunities/mine/                  - Recruiter's listings
    # POST   /api/opportunities/mine/{id}/status/      - Pause / resume / close
    # GET    /api/opportunities/mine/dashboard/        - Recruiter totals
    # GET    /api/opportunities/applicants/            - Recruiter's applicants (?opportunity=)
    # POST   /api/opportunities/applicants/{id}/status/ - Shortlist / hire / reject
    # GET    /api/opportunities/admin/                 - All listings (admin, ?status=)
    # POST   /api/opportunities/admin/{id}/review/     - Approve or reject a listing
    path('', include(router.urls)),
]
