"""
Station API – create, list, look up and delete stations.
"""
import json
import logging

from django.core.exceptions import ValidationError
from django.http import HttpResponse, JsonResponse
from django.urls import reverse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from core.models import Station
from core.registry import create_station, delete_station, get_station, list_stations
from core.utils.audit import log_action
from station.forms import StationForm

logger = logging.getLogger('subway.api')

# Station names are Korean; keep them readable in responses
JSON_DUMPS_PARAMS = {'ensure_ascii': False}


def _json(data, status=200):
    return JsonResponse(
        data, status=status, safe=False, json_dumps_params=JSON_DUMPS_PARAMS,
    )


def _parse_json_body(request):
    """Safely parse JSON request body. Returns (data, error_response)."""
    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, ValueError):
        return None, _json({'error': 'Invalid JSON body'}, status=400)
    if not isinstance(data, dict):
        return None, _json({'error': 'JSON body must be an object'}, status=400)
    return data, None


def _not_found(station_id):
    return _json({'error': f'Station {station_id} not found'}, status=404)


@csrf_exempt
@require_http_methods(['GET', 'POST'])
def station_list(request):
    """GET /stations, POST /stations"""
    if request.method == 'POST':
        return _create(request)
    return _json([s.to_dict() for s in list_stations()])


def _invalid(details):
    logger.warning('STATION_REJECTED | errors=%s', details)
    return _json({'error': 'Invalid station', 'details': details}, status=400)


def _create(request):
    data, error = _parse_json_body(request)
    if error:
        return error

    form = StationForm(data={'name': data.get('name')})
    if not form.is_valid():
        return _invalid(form.error_details())

    try:
        station = create_station(form.cleaned_data['name'])
    except ValidationError as exc:
        return _invalid(exc.message_dict)

    log_action(
        request, 'CREATE', 'Station', station.id,
        description=f"Created station '{station.name}'",
    )
    response = _json(station.to_dict(), status=201)
    response['Location'] = reverse('station_api:station_detail', args=[station.id])
    return response


@csrf_exempt
@require_http_methods(['GET', 'DELETE'])
def station_detail(request, station_id):
    """GET /stations/<id>, DELETE /stations/<id>"""
    if request.method == 'DELETE':
        try:
            station = delete_station(station_id)
        except Station.DoesNotExist:
            return _not_found(station_id)
        log_action(
            request, 'DELETE', 'Station', station.id,
            description=f"Deleted station '{station.name}'",
        )
        return HttpResponse(status=204)

    try:
        station = get_station(station_id)
    except Station.DoesNotExist:
        return _not_found(station_id)
    return _json(station.to_dict())
