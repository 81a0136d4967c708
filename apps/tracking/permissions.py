from rest_framework.permissions import BasePermission


class IsAdminForFeed(BasePermission):
    """
    Reading the live feed is admin-only; posting funnel events is open so
    anonymous visitors can reveal codes too.
    """

    message = 'Admin access required.'

    def has_permission(self, request, view):
        if request.method != 'GET':
            return True
        user = request.user
        return bool(user and user.is_authenticated and user.is_marketplace_admin)
