"""
Base model mixins for the subway project.
"""
from datetime import datetime, timezone
from django.db import models


class CreatedAtMixin(models.Model):
    """Abstract mixin stamping rows once, on first save, with a UTC Unix time."""

    created_at = models.IntegerField(
        default=None, blank=True, null=True,
        help_text="UTC Unix timestamp when created"
    )

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if self.created_at is None:
            self.created_at = utc_timestamp()
        super().save(*args, **kwargs)


def utc_timestamp():
    """Current UTC time as an integer Unix timestamp."""
    return int(datetime.now(timezone.utc).timestamp())
