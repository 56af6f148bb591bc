"""
Station app tests – API endpoint tests with the Django test client, and
acceptance tests that drive a live server over HTTP.
"""
import json

import requests
from django.test import Client, LiveServerTestCase, TestCase
from django.urls import reverse

from core.models import AuditLog, Station
from core.utils.database_cleanup import DatabaseCleanUp


class StationAPITestBase(TestCase):
    """Shared helpers for API tests."""

    def setUp(self):
        self.client = Client()

    def create(self, name):
        return self.client.post(
            reverse('station_api:station_list'),
            data=json.dumps({'name': name}),
            content_type='application/json',
        )

    def names(self):
        r = self.client.get(reverse('station_api:station_list'))
        return [s['name'] for s in json.loads(r.content)]


# ── Create ────────────────────────────────────────────────────────────────

class StationCreateAPITests(StationAPITestBase):
    """POST /stations"""

    def test_create_station(self):
        r = self.create('강남역')
        self.assertEqual(r.status_code, 201)
        data = json.loads(r.content)
        self.assertEqual(data['name'], '강남역')
        self.assertEqual(r['Location'], f"/stations/{data['id']}")
        self.assertIn('강남역', self.names())

    def test_create_keeps_names_readable(self):
        r = self.create('강남역')
        self.assertIn('강남역', r.content.decode('utf-8'))

    def test_create_records_audit_entry(self):
        data = json.loads(self.create('강남역').content)
        entry = AuditLog.objects.get()
        self.assertEqual(entry.action, 'CREATE')
        self.assertEqual(entry.resource_id, str(data['id']))

    def test_create_duplicate_name(self):
        self.assertEqual(self.create('강남역').status_code, 201)
        self.assertEqual(self.create('강남역').status_code, 201)
        self.assertEqual(self.names(), ['강남역', '강남역'])

    def test_create_blank_name(self):
        for name in ['', '   ']:
            r = self.create(name)
            self.assertEqual(r.status_code, 400)
            data = json.loads(r.content)
            self.assertIn('error', data)
            self.assertIn('name', data['details'])
        self.assertEqual(Station.objects.count(), 0)

    def test_create_missing_name(self):
        r = self.client.post(
            reverse('station_api:station_list'),
            data=json.dumps({}),
            content_type='application/json',
        )
        self.assertEqual(r.status_code, 400)

    def test_create_non_string_name(self):
        r = self.client.post(
            reverse('station_api:station_list'),
            data=json.dumps({'name': 42}),
            content_type='application/json',
        )
        self.assertEqual(r.status_code, 400)
        self.assertIn('name', json.loads(r.content)['details'])

    def test_create_list_name(self):
        r = self.client.post(
            reverse('station_api:station_list'),
            data=json.dumps({'name': ['강남역']}),
            content_type='application/json',
        )
        self.assertEqual(r.status_code, 400)
        self.assertIn('name', json.loads(r.content)['details'])
        self.assertEqual(Station.objects.count(), 0)

    def test_create_lone_surrogate_name(self):
        r = self.client.post(
            reverse('station_api:station_list'),
            data='{"name": "\\ud800"}',
            content_type='application/json',
        )
        self.assertEqual(r.status_code, 400)
        self.assertIn('name', json.loads(r.content)['details'])
        self.assertEqual(Station.objects.count(), 0)

    def test_create_long_name(self):
        r = self.create('역' * 256)
        self.assertEqual(r.status_code, 400)

    def test_create_invalid_json(self):
        r = self.client.post(
            reverse('station_api:station_list'),
            data='{not json',
            content_type='application/json',
        )
        self.assertEqual(r.status_code, 400)
        self.assertEqual(json.loads(r.content)['error'], 'Invalid JSON body')

    def test_create_json_array(self):
        r = self.client.post(
            reverse('station_api:station_list'),
            data=json.dumps(['강남역']),
            content_type='application/json',
        )
        self.assertEqual(r.status_code, 400)

    def test_rejected_payload_is_logged(self):
        with self.assertLogs('subway.api', level='WARNING') as logs:
            self.create('')
        self.assertIn('STATION_REJECTED', logs.output[0])


# ── List & detail ─────────────────────────────────────────────────────────

class StationReadAPITests(StationAPITestBase):
    """GET /stations, GET /stations/<id>"""

    def test_list_empty(self):
        r = self.client.get(reverse('station_api:station_list'))
        self.assertEqual(r.status_code, 200)
        self.assertEqual(json.loads(r.content), [])

    def test_list_stations(self):
        self.create('신논현역')
        self.create('언주역')
        r = self.client.get(reverse('station_api:station_list'))
        data = json.loads(r.content)
        self.assertEqual(len(data), 2)
        self.assertEqual([s['name'] for s in data], ['신논현역', '언주역'])
        self.assertTrue(all('id' in s for s in data))

    def test_list_is_repeatable(self):
        self.create('신논현역')
        self.create('언주역')
        first = self.client.get(reverse('station_api:station_list')).content
        second = self.client.get(reverse('station_api:station_list')).content
        self.assertEqual(json.loads(first), json.loads(second))

    def test_get_station(self):
        station_id = json.loads(self.create('서대문').content)['id']
        r = self.client.get(reverse('station_api:station_detail', args=[station_id]))
        self.assertEqual(r.status_code, 200)
        self.assertEqual(json.loads(r.content)['name'], '서대문')

    def test_get_missing_station(self):
        r = self.client.get(reverse('station_api:station_detail', args=[999]))
        self.assertEqual(r.status_code, 404)
        self.assertIn('error', json.loads(r.content))


# ── Delete ────────────────────────────────────────────────────────────────

class StationDeleteAPITests(StationAPITestBase):
    """DELETE /stations/<id>"""

    def test_delete_station(self):
        station_id = json.loads(self.create('서대문').content)['id']
        r = self.client.delete(reverse('station_api:station_detail', args=[station_id]))
        self.assertEqual(r.status_code, 204)
        self.assertNotIn('서대문', self.names())

    def test_delete_records_audit_entry(self):
        station_id = json.loads(self.create('서대문').content)['id']
        self.client.delete(reverse('station_api:station_detail', args=[station_id]))
        entry = AuditLog.objects.filter(action='DELETE').get()
        self.assertEqual(entry.resource_id, str(station_id))

    def test_delete_only_target(self):
        keep_id = json.loads(self.create('강남역').content)['id']
        drop_id = json.loads(self.create('역삼역').content)['id']
        self.client.delete(reverse('station_api:station_detail', args=[drop_id]))
        self.assertEqual(self.names(), ['강남역'])
        self.assertTrue(Station.objects.filter(pk=keep_id).exists())

    def test_delete_missing_station(self):
        r = self.client.delete(reverse('station_api:station_detail', args=[999]))
        self.assertEqual(r.status_code, 404)
        self.assertEqual(json.loads(r.content)['error'], 'Station 999 not found')

    def test_delete_twice(self):
        station_id = json.loads(self.create('서대문').content)['id']
        url = reverse('station_api:station_detail', args=[station_id])
        self.assertEqual(self.client.delete(url).status_code, 204)
        self.assertEqual(self.client.delete(url).status_code, 404)


# ── Routing, errors and headers ───────────────────────────────────────────

class StationRoutingTests(StationAPITestBase):
    """Method handling, JSON error pages and security headers."""

    def test_method_not_allowed(self):
        r = self.client.put(reverse('station_api:station_list'))
        self.assertEqual(r.status_code, 405)
        r = self.client.post(reverse('station_api:station_detail', args=[1]))
        self.assertEqual(r.status_code, 405)

    def test_unknown_path_returns_json_404(self):
        r = self.client.get('/lines')
        self.assertEqual(r.status_code, 404)
        self.assertEqual(json.loads(r.content), {'error': 'Not found'})

    def test_security_headers(self):
        r = self.client.get(reverse('station_api:station_list'))
        self.assertIn("default-src 'none'", r['Content-Security-Policy'])
        self.assertEqual(r['Referrer-Policy'], 'no-referrer')
        self.assertIn('Permissions-Policy', r)
        self.assertIn('X-Frame-Options', r)


# ── Acceptance tests (live server) ────────────────────────────────────────

class StationApiClient:
    """HTTP client for the station endpoints, bound to one base URL."""

    def __init__(self, base_url, timeout=10):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

    def create_station(self, name):
        return self.session.post(
            f'{self.base_url}/stations', json={'name': name}, timeout=self.timeout,
        )

    def get_stations(self):
        return self.session.get(f'{self.base_url}/stations', timeout=self.timeout)

    def delete_station(self, station_id):
        return self.session.delete(
            f'{self.base_url}/stations/{station_id}',
            headers={'Accept': 'application/json'},
            timeout=self.timeout,
        )

    def station_names(self):
        return [s['name'] for s in self.get_stations().json()]

    def close(self):
        self.session.close()


class StationAcceptanceTest(LiveServerTestCase):
    """지하철역 관련 기능 – black-box tests against a running server."""

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        cls.database_cleanup = DatabaseCleanUp()
        cls.database_cleanup.collect_tables()

    def setUp(self):
        self.database_cleanup.execute()
        self.api = StationApiClient(self.live_server_url)

    def tearDown(self):
        self.api.close()

    def test_create_station(self):
        """
        When 지하철역을 생성하면
        Then 지하철역이 생성된다
        Then 지하철역 목록 조회 시 생성한 역을 찾을 수 있다
        """
        response = self.api.create_station('강남역')

        self.assertEqual(response.status_code, 201)
        self.assertIn('강남역', self.api.station_names())

    def test_get_stations(self):
        """
        Given 2개의 지하철역을 생성하고
        When 지하철역 목록을 조회하면
        Then 2개의 지하철역을 응답 받는다
        """
        self.api.create_station('신논현역')
        self.api.create_station('언주역')

        response = self.api.get_stations()

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()), 2)

    def test_delete_station(self):
        """
        Given 지하철역을 생성하고
        When 그 지하철역을 삭제하면
        Then 그 지하철역 목록 조회 시 생성한 역을 찾을 수 없다
        """
        self.api.create_station('서대문')

        self.api.delete_station(1)

        self.assertNotIn('서대문', self.api.station_names())

    def test_first_station_gets_id_one(self):
        self.assertEqual(self.api.create_station('강남역').json()['id'], 1)
        self.assertEqual(self.api.create_station('역삼역').json()['id'], 2)

    def test_list_is_repeatable(self):
        self.api.create_station('신논현역')
        self.api.create_station('언주역')
        self.assertEqual(self.api.get_stations().json(), self.api.get_stations().json())

    def test_delete_missing_station(self):
        response = self.api.delete_station(999)

        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.api.get_stations().status_code, 200)

    def test_names_round_trip(self):
        names = ['강남역', '고속터미널 (Express Bus Terminal)', 'Gangnam']
        for name in names:
            self.api.create_station(name)

        self.assertEqual(self.api.station_names(), names)
