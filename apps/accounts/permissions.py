"""
Role-based permission classes shared by every app.

Permission Classes:
    IsAdmin - Requires the admin role
    IsVendor - Requires the vendor role
    IsVendorOrAdmin - Requires vendor or admin role

Usage:
    from apps.accounts.permissions import IsVendorOrAdmin

    @api_view(['POST'])
    @permission_classes([IsAuthenticated, IsVendorOrAdmin])
    def create_roll(request):
        ...
"""

from rest_framework.permissions import BasePermission


class IsAdmin(BasePermission):
    """
    Allows access only to users with the admin role.

    Usage:
        @permission_classes([IsAuthenticated, IsAdmin])
        def list_users(request):
            ...
    """

    message = 'Admin access required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)


class IsVendor(BasePermission):
    """
    Allows access only to users with the vendor role.

    Usage:
        @permission_classes([IsAuthenticated, IsVendor])
        def my_shop_requests(request):
            ...
    """

    message = 'Vendor access required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_vendor)


class IsVendorOrAdmin(BasePermission):
    """
    Allows access to vendors and admins.

    Usage:
        def get_permissions(self):
            if self.action == 'create':
                return [IsAuthenticated(), IsVendorOrAdmin()]
            return super().get_permissions()
    """

    message = 'Only vendors and admins can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user and user.is_authenticated and (user.is_vendor or user.is_admin)
        )
