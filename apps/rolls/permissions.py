"""
Custom permission classes for rolls app.

Permission Classes:
    IsRollCreatorOrAdmin - Roll creator or admin (editing)
    CanDeleteRoll - Roll creator, owner of the roll's shop, or admin
    IsCommentAuthor - Comment author only
"""

from rest_framework.permissions import BasePermission


class IsRollCreatorOrAdmin(BasePermission):
    message = 'Only the creator can edit this roll.'

    def has_object_permission(self, request, view, obj):
        user = request.user
        return bool(user.is_admin or obj.created_by_id == user.id)


class CanDeleteRoll(BasePermission):
    message = 'You do not have permission to delete this roll.'

    def has_object_permission(self, request, view, obj):
        user = request.user
        if user.is_admin or obj.created_by_id == user.id:
            return True
        return obj.shop.is_owned_by(user)


class IsCommentAuthor(BasePermission):
    message = 'You can only modify your own comments.'

    def has_object_permission(self, request, view, obj):
        return obj.user_id == request.user.id
