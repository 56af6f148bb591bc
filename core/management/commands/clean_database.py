"""
Management command: clean_database

Empties every application table and resets id sequences.
"""
from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS

from core.utils.database_cleanup import DatabaseCleanUp


class Command(BaseCommand):
    help = 'Delete all rows from every table and restart id sequences'

    def add_arguments(self, parser):
        parser.add_argument('--database', default=DEFAULT_DB_ALIAS)
        parser.add_argument(
            '--noinput', '--no-input', action='store_false', dest='interactive',
            help='Do not prompt for confirmation.',
        )

    def handle(self, *args, **options):
        cleanup = DatabaseCleanUp(using=options['database'])
        tables = cleanup.collect_tables()

        if options['interactive']:
            confirm = input(
                f'This will delete ALL data in {len(tables)} table(s) on '
                f'"{options["database"]}". Type "yes" to continue: '
            )
            if confirm != 'yes':
                raise CommandError('Cleanup cancelled.')

        cleanup.execute()
        self.stdout.write(self.style.SUCCESS(
            f'Done. {len(tables)} table(s) emptied.'
        ))
