"""
Database cleanup – empties every application table and resets id sequences.

Used before each acceptance test so every test starts from an empty store
where the first station created gets id 1, and by the ``clean_database``
management command.
"""
import logging

from django.core.management.color import no_style
from django.db import DEFAULT_DB_ALIAS, connections

logger = logging.getLogger('subway.audit')


class DatabaseCleanUp:
    """Truncates all Django-managed tables on one database connection."""

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using
        self.table_names = []

    @property
    def connection(self):
        return connections[self.using]

    def collect_tables(self):
        """Discover the existing tables that belong to installed models."""
        self.table_names = sorted(
            self.connection.introspection.django_table_names(
                only_existing=True, include_views=False,
            )
        )
        return self.table_names

    def execute(self):
        """Empty every collected table and restart its identity sequence."""
        if not self.table_names:
            self.collect_tables()

        sql_list = self.connection.ops.sql_flush(
            no_style(),
            self.table_names,
            reset_sequences=True,
            allow_cascade=True,
        )
        self.connection.ops.execute_sql_flush(sql_list)
        logger.info(
            'DATABASE_CLEANED | db=%s | tables=%s',
            self.using,
            len(self.table_names),
        )
