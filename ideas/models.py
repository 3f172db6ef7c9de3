import uuid

from django.conf import settings
from django.db import models


class Idea(models.Model):
    """Suggestion posted by a user. Only its owner may change or remove it."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    summary = models.TextField()
    description = models.TextField()
    tags = models.JSONField(default=list, blank=True)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='ideas')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'ideas'
        verbose_name = 'Idea'
        verbose_name_plural = 'Ideas'
        ordering = ['-created_at']

    def __str__(self):
        return self.title
