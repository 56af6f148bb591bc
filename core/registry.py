"""
Station registry – the one place stations are created, listed, looked up
and deleted.

The API views, management commands and tests all go through these functions
so they share the same rules:
  - names are stripped of surrounding whitespace; blank names are rejected
  - names must be UTF-8 encodable (no lone surrogates)
  - duplicate names are allowed
  - ids come from the database's auto-increment key and are never reused
  - looking up or deleting a missing id raises Station.DoesNotExist
"""
from django.core.exceptions import ValidationError
from django.db import transaction

from core.models import Station


def create_station(name):
    """Validate and store a new station, returning the saved instance."""
    if not isinstance(name, str):
        raise ValidationError({'name': ['Station name must be a string.']})
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        raise ValidationError({'name': ['Station name must be valid UTF-8 text.']})

    station = Station(name=name.strip())
    station.full_clean()
    station.save()
    return station


def list_stations():
    """All stations in insertion (id) order."""
    return Station.objects.order_by('id')


def get_station(station_id):
    return Station.objects.get(pk=station_id)


def delete_station(station_id):
    """
    Delete the station with the given id.

    Returns the removed instance. Django clears ``pk`` on delete, so the
    original id is restored on the returned object for callers that report
    it.
    """
    with transaction.atomic():
        station = Station.objects.select_for_update().get(pk=station_id)
        station.delete()
    station.id = station_id
    return station
