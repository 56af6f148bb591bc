"""
Audit logging utility for recording station mutations.
"""
from django.conf import settings

from core.models.audit import AuditLog
from core.models.mixins import utc_timestamp


def log_action(request, action, resource_type, resource_id='', description='', extra_data=None):
    """
    Create an audit log entry.

    Args:
        request: Django HttpRequest (can be None for system actions)
        action: Action type string (CREATE, DELETE)
        resource_type: Model name or resource category
        resource_id: Primary key of affected resource
        description: Human-readable description
        extra_data: Optional dict with extra context
    """
    ip_address = None
    user_agent = ''

    if request:
        ip_address = _get_client_ip(request)
        user_agent = request.META.get('HTTP_USER_AGENT', '')

    return AuditLog.objects.create(
        action=action,
        resource_type=resource_type,
        resource_id=str(resource_id),
        description=description,
        ip_address=ip_address,
        user_agent=user_agent,
        extra_data=extra_data,
        timestamp=utc_timestamp(),
    )


def _get_client_ip(request):
    """
    Extract the real client IP from the request.

    X-Forwarded-For is only believed when the request came from one of
    settings.TRUSTED_PROXIES; otherwise REMOTE_ADDR is used.
    """
    trusted_proxies = getattr(settings, 'TRUSTED_PROXIES', [])
    remote_addr = request.META.get('REMOTE_ADDR', '')
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')

    if x_forwarded_for and remote_addr in trusted_proxies:
        # First IP in the chain is the original client
        return x_forwarded_for.split(',')[0].strip()

    return remote_addr or None
