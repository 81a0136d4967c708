"""
Role-based permission classes shared by the marketplace apps.

Usage:
    @permission_classes([IsAuthenticated, IsMarketplaceAdmin])
    def tracking_feed(request):
        ...
"""
from rest_framework.permissions import BasePermission

from .models import UserRole


class IsMarketplaceAdmin(BasePermission):
    """Staff users and accounts with the admin role."""

    message = 'Admin access required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_marketplace_admin)


class HasRole(BasePermission):
    """
    Base class for single-role checks.

    Subclasses set ``role``; admins always pass.
    """

    role = None
    message = 'You do not have the required role for this action.'

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return user.role == self.role or user.is_marketplace_admin


class IsStudent(HasRole):
    role = UserRole.STUDENT
    message = 'Student account required.'


class IsMerchant(HasRole):
    role = UserRole.MERCHANT
    message = 'Merchant account required.'


class IsRecruiter(HasRole):
    role = UserRole.RECRUITER
    message = 'Recruiter account required.'
