"""
Management command: seed_stations

Creates stations by name, defaulting to settings.DEFAULT_STATIONS.
"""
from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from core.models import Station
from core.registry import create_station


class Command(BaseCommand):
    help = 'Create stations that do not exist yet'

    def add_arguments(self, parser):
        parser.add_argument('names', nargs='*', help='Station names to create')

    def handle(self, *args, **options):
        names = options['names'] or settings.DEFAULT_STATIONS
        created = 0
        for name in names:
            if Station.objects.filter(name=name.strip()).exists():
                self.stdout.write(f'  Already exists: {name}')
                continue
            try:
                station = create_station(name)
            except ValidationError as exc:
                raise CommandError(f'Invalid station name {name!r}: {exc.messages[0]}')
            created += 1
            self.stdout.write(f'  Created station: {station.name} (#{station.id})')

        self.stdout.write(self.style.SUCCESS(
            f'Done. {created} new station(s) created, {len(names) - created} already existed.'
        ))
