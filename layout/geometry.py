# layout/geometry.py

from __future__ import annotations
import math

from core.domain.model import LatLng

# radio usado por la librería de geometría de Google Maps
EARTH_RADIUS_M = 6378137.0


def compute_offset(origin: LatLng, distance_m: float, heading_deg: float) -> LatLng:
    """Punto destino a distance_m metros y rumbo heading_deg (grados desde el norte, horario)."""
    lat, lng = origin
    distance = float(distance_m) / EARTH_RADIUS_M
    heading = math.radians(heading_deg)

    from_lat = math.radians(lat)
    from_lng = math.radians(lng)

    cos_distance = math.cos(distance)
    sin_distance = math.sin(distance)
    sin_from_lat = math.sin(from_lat)
    cos_from_lat = math.cos(from_lat)

    sin_lat = cos_distance * sin_from_lat + sin_distance * cos_from_lat * math.cos(heading)
    d_lng = math.atan2(
        sin_distance * cos_from_lat * math.sin(heading),
        cos_distance - sin_from_lat * sin_lat,
    )
    return math.degrees(math.asin(sin_lat)), math.degrees(from_lng + d_lng)


def compute_distance_between(a: LatLng, b: LatLng) -> float:
    # haversine
    lat1, lng1 = (math.radians(v) for v in a)
    lat2, lng2 = (math.radians(v) for v in b)
    h = (
        math.sin((lat1 - lat2) / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin((lng1 - lng2) / 2) ** 2
    )
    return 2 * math.asin(math.sqrt(h)) * EARTH_RADIUS_M


def bounding_radius_m(ne: LatLng, sw: LatLng) -> int:
    """Radio (m, entero hacia arriba) que cubre la caja del edificio."""
    return int(math.ceil(compute_distance_between(ne, sw) / 2))


def corner_bearing_deg(x: float, y: float) -> float:
    return math.atan2(y, x) * (180 / math.pi)
