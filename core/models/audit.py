"""
AuditLog model – records every station mutation made through the API.
"""
from django.db import models
from .mixins import utc_timestamp


class AuditLog(models.Model):
    """Append-only audit trail of create/delete actions."""

    ACTION_CHOICES = [
        ('CREATE', 'Create'),
        ('DELETE', 'Delete'),
    ]

    id = models.BigAutoField(primary_key=True)

    action = models.CharField(max_length=20, choices=ACTION_CHOICES)
    resource_type = models.CharField(max_length=50)  # e.g. 'Station'
    resource_id = models.CharField(max_length=36, blank=True, default='')

    description = models.TextField(blank=True, default='')
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    user_agent = models.TextField(blank=True, default='')
    extra_data = models.JSONField(null=True, blank=True)

    timestamp = models.IntegerField(db_index=True)

    class Meta:
        db_table = 'audit_logs'
        ordering = ['-timestamp', '-id']
        indexes = [
            models.Index(fields=['resource_type', 'resource_id'], name='idx_audit_resource'),
        ]

    def __str__(self):
        return f'[{self.action}] {self.resource_type} {self.resource_id}'

    def save(self, *args, **kwargs):
        if not self.timestamp:
            self.timestamp = utc_timestamp()
        super().save(*args, **kwargs)
