"""Station API URLs – JSON endpoints under /stations."""
from django.urls import path

from .api import stations

app_name = 'station_api'

urlpatterns = [
    path('stations', stations.station_list, name='station_list'),
    path('stations/<int:station_id>', stations.station_detail, name='station_detail'),
]
