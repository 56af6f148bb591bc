"""
Core models package – subway domain models.
"""
from .mixins import CreatedAtMixin
from .station import Station
from .audit import AuditLog

__all__ = [
    # Base
    'CreatedAtMixin',
    # Stations
    'Station',
    # Audit
    'AuditLog',
]
