"""
Custom permission classes for shops app.

Permission Classes:
    IsAdminOrReadOnly - Safe methods for everyone, writes for admins
    IsShopOwnerOrAdmin - Object owner (shop vendor) or admin

IsShopOwnerOrAdmin also accepts objects that hang off a shop (offers,
coupons) and resolves ownership through their ``shop`` attribute.
"""

from rest_framework.permissions import BasePermission, SAFE_METHODS


def owning_shop(obj):
    """Return the shop an object belongs to (or the object itself)."""
    from .models import Shop

    if isinstance(obj, Shop):
        return obj
    return getattr(obj, 'shop', None)


class IsAdminOrReadOnly(BasePermission):
    """
    Read access for anyone, write access for admins.

    Usage:
        class CategoryViewSet(viewsets.ModelViewSet):
            permission_classes = [IsAdminOrReadOnly]
    """

    message = 'Admin access required.'

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)


class IsShopOwnerOrAdmin(BasePermission):
    """
    Allows the shop's vendor or an admin.

    Usage:
        def get_permissions(self):
            if self.action in ['update', 'partial_update']:
                return [IsAuthenticated(), IsShopOwnerOrAdmin()]
            return super().get_permissions()
    """

    message = 'You can only manage your own shop.'

    def has_object_permission(self, request, view, obj):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if user.is_admin:
            return True

        shop = owning_shop(obj)
        return shop is not None and shop.is_owned_by(user)
