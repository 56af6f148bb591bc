"""
Core tests – station model, registry rules, audit trail, database cleanup
and management commands.
"""
from io import StringIO

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.test import RequestFactory, TestCase, override_settings

from core.models import AuditLog, Station
from core.registry import create_station, delete_station, get_station, list_stations
from core.utils.audit import log_action
from core.utils.database_cleanup import DatabaseCleanUp


class StationModelTest(TestCase):
    """Test the Station model."""

    def test_created_at_set_once(self):
        station = Station.objects.create(name='강남역')
        created_at = station.created_at
        self.assertIsNotNone(created_at)
        station.save()
        self.assertEqual(station.created_at, created_at)
        self.assertNotIn('updated_at', station.to_dict())

    def test_to_dict(self):
        station = Station.objects.create(name='강남역')
        data = station.to_dict()
        self.assertEqual(data['id'], station.id)
        self.assertEqual(data['name'], '강남역')
        self.assertIn('created_at', data)

    def test_str(self):
        station = Station.objects.create(name='역삼역')
        self.assertIn('역삼역', str(station))


# ── Registry ──────────────────────────────────────────────────────────────

class StationRegistryTest(TestCase):
    """Test create/list/get/delete through the registry."""

    def test_create_returns_saved_station(self):
        station = create_station('강남역')
        self.assertIsNotNone(station.id)
        self.assertTrue(Station.objects.filter(pk=station.id, name='강남역').exists())

    def test_create_strips_whitespace(self):
        station = create_station('  선릉역 ')
        self.assertEqual(station.name, '선릉역')

    def test_create_rejects_blank_name(self):
        with self.assertRaises(ValidationError):
            create_station('')
        with self.assertRaises(ValidationError):
            create_station('   ')
        self.assertEqual(Station.objects.count(), 0)

    def test_create_rejects_long_name(self):
        with self.assertRaises(ValidationError):
            create_station('역' * 256)

    def test_create_rejects_non_string(self):
        with self.assertRaises(ValidationError):
            create_station(None)

    def test_create_rejects_lone_surrogate(self):
        with self.assertRaises(ValidationError) as ctx:
            create_station('\ud800')
        self.assertIn('name', ctx.exception.message_dict)
        self.assertEqual(Station.objects.count(), 0)

    def test_duplicate_names_allowed(self):
        first = create_station('강남역')
        second = create_station('강남역')
        self.assertNotEqual(first.id, second.id)
        self.assertEqual(Station.objects.filter(name='강남역').count(), 2)

    def test_ids_increase(self):
        first = create_station('신논현역')
        second = create_station('언주역')
        self.assertGreater(second.id, first.id)

    def test_list_in_insertion_order(self):
        for name in ['신논현역', '언주역', '선정릉역']:
            create_station(name)
        names = [s.name for s in list_stations()]
        self.assertEqual(names, ['신논현역', '언주역', '선정릉역'])

    def test_list_is_repeatable(self):
        create_station('신논현역')
        create_station('언주역')
        first = [s.to_dict() for s in list_stations()]
        second = [s.to_dict() for s in list_stations()]
        self.assertEqual(first, second)

    def test_get_station(self):
        station = create_station('서대문')
        self.assertEqual(get_station(station.id).name, '서대문')

    def test_get_missing_station(self):
        with self.assertRaises(Station.DoesNotExist):
            get_station(999)

    def test_delete_station(self):
        station = create_station('서대문')
        deleted = delete_station(station.id)
        self.assertEqual(deleted.id, station.id)
        self.assertEqual(deleted.name, '서대문')
        self.assertFalse(Station.objects.filter(pk=station.id).exists())

    def test_delete_missing_station(self):
        with self.assertRaises(Station.DoesNotExist):
            delete_station(999)

    def test_ids_not_reused_after_delete(self):
        create_station('강남역')
        last = create_station('역삼역')
        delete_station(last.id)
        replacement = create_station('선릉역')
        self.assertGreater(replacement.id, last.id)


# ── Audit trail ───────────────────────────────────────────────────────────

class AuditTest(TestCase):
    """Test audit log rows and audit logger output."""

    def test_log_action_without_request(self):
        entry = log_action(None, 'CREATE', 'Station', 7, description='seeded')
        self.assertEqual(entry.resource_id, '7')
        self.assertIsNone(entry.ip_address)
        self.assertIsNotNone(entry.timestamp)

    @override_settings(TRUSTED_PROXIES=['127.0.0.1'])
    def test_log_action_uses_forwarded_ip_from_trusted_proxy(self):
        request = RequestFactory().post(
            '/stations',
            HTTP_X_FORWARDED_FOR='203.0.113.5, 10.0.0.1',
            HTTP_USER_AGENT='pytest',
        )
        entry = log_action(request, 'DELETE', 'Station', 3)
        self.assertEqual(entry.ip_address, '203.0.113.5')
        self.assertEqual(entry.user_agent, 'pytest')
        self.assertEqual(AuditLog.objects.count(), 1)

    @override_settings(TRUSTED_PROXIES=[])
    def test_log_action_ignores_forwarded_ip_from_untrusted_peer(self):
        request = RequestFactory().post(
            '/stations',
            HTTP_X_FORWARDED_FOR='203.0.113.5',
        )
        entry = log_action(request, 'DELETE', 'Station', 3)
        self.assertEqual(entry.ip_address, '127.0.0.1')

    def test_create_and_delete_are_logged(self):
        with self.assertLogs('subway.audit', level='INFO') as logs:
            station = create_station('강남역')
            delete_station(station.id)
        output = '\n'.join(logs.output)
        self.assertIn(f'STATION_CREATED | id={station.id} | name=강남역', output)
        self.assertIn(f'STATION_DELETED | id={station.id} | name=강남역', output)


# ── Database cleanup ──────────────────────────────────────────────────────

class DatabaseCleanUpTest(TestCase):
    """Test that cleanup empties tables and restarts id sequences."""

    def test_collect_tables(self):
        tables = DatabaseCleanUp().collect_tables()
        self.assertIn('stations', tables)
        self.assertIn('audit_logs', tables)

    def test_execute_empties_tables(self):
        create_station('강남역')
        create_station('역삼역')
        log_action(None, 'CREATE', 'Station', 1)

        DatabaseCleanUp().execute()

        self.assertEqual(Station.objects.count(), 0)
        self.assertEqual(AuditLog.objects.count(), 0)

    def test_execute_resets_ids(self):
        for name in ['강남역', '역삼역', '선릉역']:
            create_station(name)

        DatabaseCleanUp().execute()

        self.assertEqual(create_station('서대문').id, 1)


# ── Management commands ───────────────────────────────────────────────────

class ManagementCommandTest(TestCase):
    """Test seed_stations and clean_database."""

    def test_seed_default_stations(self):
        out = StringIO()
        call_command('seed_stations', stdout=out)
        self.assertEqual(Station.objects.count(), len(settings.DEFAULT_STATIONS))
        self.assertIn('Done.', out.getvalue())

    def test_seed_skips_existing(self):
        create_station('강남역')
        out = StringIO()
        call_command('seed_stations', '강남역', '역삼역', stdout=out)
        self.assertEqual(Station.objects.filter(name='강남역').count(), 1)
        self.assertTrue(Station.objects.filter(name='역삼역').exists())
        self.assertIn('1 new station(s) created, 1 already existed', out.getvalue())

    def test_clean_database(self):
        create_station('강남역')
        out = StringIO()
        call_command('clean_database', interactive=False, stdout=out)
        self.assertEqual(Station.objects.count(), 0)
        self.assertIn('table(s) emptied', out.getvalue())
