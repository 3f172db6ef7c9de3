"""Custom permissions for the application"""
from rest_framework import permissions

from .models import User


class IsAuthenticated(permissions.BasePermission):
    """
    Permission to only allow authenticated users.
    """

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated)


class HasRole(permissions.BasePermission):
    """
    Permission to only allow users holding one of ``roles``.
    """

    roles = ()

    def has_permission(self, request, view):
        return bool(
            request.user and
            request.user.is_authenticated and
            getattr(request.user, 'role', None) in self.roles
        )


class IsAdmin(HasRole):
    """
    Permission to only allow admin users.
    """

    roles = (User.ROLE_ADMIN,)


class IsAdminOrSupervisor(HasRole):
    """
    Permission to allow admins and supervisors.
    """

    roles = (User.ROLE_ADMIN, User.ROLE_SUPERVISOR)


class IsAuthenticatedOrReadOnly(permissions.BasePermission):
    """
    Reads are public, writes need a logged-in user.
    """

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return bool(request.user and request.user.is_authenticated)
