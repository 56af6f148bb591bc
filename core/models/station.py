"""
Station model – a named subway station.
"""
from django.db import models
from .mixins import CreatedAtMixin


class Station(CreatedAtMixin):
    """A subway station. Names are display labels and need not be unique."""

    id = models.AutoField(primary_key=True)
    name = models.CharField(max_length=255)

    class Meta:
        db_table = 'stations'
        ordering = ['id']

    def __str__(self):
        return f'{self.name} (#{self.id})'

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'created_at': self.created_at,
        }
