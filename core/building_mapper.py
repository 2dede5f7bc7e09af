# core/building_mapper.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from core.domain.model import (
    LANDSCAPE,
    ORIENTATIONS,
    BoundingBox,
    BuildingInsights,
    LatLng,
    PanelConfiguration,
    PanelPlacement,
    RoofSegmentStats,
)
from core.errors import InvalidInput


# =========================
# Helpers de lectura
# =========================
def _req(d: Dict[str, Any], k: str, ctx: str) -> Any:
    if not isinstance(d, dict) or k not in d or d[k] is None:
        raise InvalidInput(f"Falta '{k}' en {ctx}")
    return d[k]


def _req_num(d: Dict[str, Any], k: str, ctx: str) -> float:
    v = _req(d, k, ctx)
    try:
        return float(v)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"'{k}' debe ser numérico en {ctx}. Valor={v!r}") from e


def _opt_num(d: Dict[str, Any], k: str, ctx: str, default: float) -> float:
    if not isinstance(d, dict) or d.get(k) is None:
        return default
    return _req_num(d, k, ctx)


def _latlng(d: Dict[str, Any], ctx: str) -> LatLng:
    return _req_num(d, "latitude", ctx), _req_num(d, "longitude", ctx)


def _opt_latlng(doc: Dict[str, Any], k: str) -> Optional[LatLng]:
    v = doc.get(k)
    return _latlng(v, k) if v is not None else None


# =========================
# Bloques
# =========================
def _configs(sp: Dict[str, Any]) -> List[PanelConfiguration]:
    out = []
    for i, c in enumerate(sp.get("solarPanelConfigs") or []):
        ctx = f"solarPanelConfigs[{i}]"
        out.append(PanelConfiguration(
            panels_count=int(_req_num(c, "panelsCount", ctx)),
            yearly_energy_dc_kwh=_req_num(c, "yearlyEnergyDcKwh", ctx),
        ))
    return out


def _panels(sp: Dict[str, Any]) -> List[PanelPlacement]:
    out = []
    for i, p in enumerate(sp.get("solarPanels") or []):
        ctx = f"solarPanels[{i}]"
        lat, lng = _latlng(_req(p, "center", ctx), f"{ctx}.center")
        orientation = str(p.get("orientation") or LANDSCAPE).upper()
        if orientation not in ORIENTATIONS:
            raise InvalidInput(f"Orientación inválida en {ctx}: {orientation!r}")
        out.append(PanelPlacement(
            center_lat=lat,
            center_lng=lng,
            orientation_degrees=_opt_num(p, "orientationDegrees", ctx, 0.0),
            roof_segment_index=int(_req_num(p, "segmentIndex", ctx)),
            yearly_energy_dc_kwh=_req_num(p, "yearlyEnergyDcKwh", ctx),
            orientation=orientation,
        ))
    return out


def _segments(sp: Dict[str, Any]) -> List[RoofSegmentStats]:
    out = []
    for i, s in enumerate(sp.get("roofSegmentStats") or []):
        ctx = f"roofSegmentStats[{i}]"
        out.append(RoofSegmentStats(
            azimuth_degrees=_req_num(s, "azimuthDegrees", ctx),
            pitch_degrees=_opt_num(s, "pitchDegrees", ctx, 0.0),
            area_m2=_opt_num(s.get("stats") or {}, "areaMeters2", f"{ctx}.stats", 0.0),
        ))
    return out


# =========================
# API pública única
# =========================
def building_from_dict(data: Dict[str, Any]) -> BuildingInsights:
    """
    Entradas: documento building-insights ya descargado (claves camelCase).
    Salidas: BuildingInsights con paneles en el orden recibido (mayor a menor energía).
    """
    sp = _req(data, "solarPotential", "building")

    bbox = data.get("boundingBox")
    bounding_box = None
    if bbox is not None:
        bounding_box = BoundingBox(
            ne=_latlng(_req(bbox, "ne", "boundingBox"), "boundingBox.ne"),
            sw=_latlng(_req(bbox, "sw", "boundingBox"), "boundingBox.sw"),
        )

    return BuildingInsights(
        configs=_configs(sp),
        panels=_panels(sp),
        segments=_segments(sp),
        panel_width_m=_req_num(sp, "panelWidthMeters", "solarPotential"),
        panel_height_m=_req_num(sp, "panelHeightMeters", "solarPotential"),
        panel_capacity_watts=_req_num(sp, "panelCapacityWatts", "solarPotential"),
        center=_opt_latlng(data, "center"),
        bounding_box=bounding_box,
    )
