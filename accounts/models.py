from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models

from . import workflow


class CustomUserManager(BaseUserManager):
    """Custom user manager where username is the unique identifier"""

    def create_user(self, username, password=None, **extra_fields):
        """Create and save a regular user with the given username and password"""
        if not username:
            raise ValueError('The Username field must be set')
        username = self.model.normalize_username(username)
        extra_fields.setdefault('name', username)
        user = self.model(username=username, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, password=None, **extra_fields):
        """Create and save a superuser with the given username and password"""
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', User.ROLE_ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(username, password, **extra_fields)


class User(AbstractUser):
    """Application user. The role decides what the user may touch and how
    the records they create enter the approval workflow."""

    ROLE_ADMIN = 'admin'
    ROLE_SUPERVISOR = 'supervisor'
    ROLE_EMPLOYEE = 'employee'

    ROLE_CHOICES = [
        (ROLE_ADMIN, 'Admin'),
        (ROLE_SUPERVISOR, 'Supervisor'),
        (ROLE_EMPLOYEE, 'Employee'),
    ]

    name = models.CharField(max_length=255, help_text='Display name used on records the user creates')
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_EMPLOYEE, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    REQUIRED_FIELDS = []

    objects = CustomUserManager()

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return self.username

    @property
    def is_admin(self):
        return self.role == self.ROLE_ADMIN


class TrackedModel(models.Model):
    """Creation metadata shared by every governed record.

    ``created_by`` / ``created_by_name`` are written once at insert and never
    touched by updates.
    """

    created_by = models.IntegerField(null=True, blank=True, db_index=True, help_text='User ID of the creator')
    created_by_name = models.CharField(max_length=255, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def stamp_creator(self, actor):
        self.created_by = actor.id
        self.created_by_name = actor.name or ''


class ApprovalModel(TrackedModel):
    """Record gated by the Pending/Approved/Rejected workflow."""

    status = models.CharField(
        max_length=10,
        choices=workflow.STATUS_CHOICES,
        default=workflow.STATUS_PENDING,
        db_index=True,
    )

    class Meta:
        abstract = True
