# apps/domains/quizzes/permissions.py

from rest_framework.permissions import BasePermission


class IsAdminOrStaff(BasePermission):
    """
    관리자 / 운영자 전용 Permission
    """
    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and (user.is_superuser or user.is_staff)
        )
