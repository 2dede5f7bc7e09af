# layout/placement.py
from __future__ import annotations

import math
from typing import List, Mapping, Optional, Sequence, Union

from core.domain.model import (
    LANDSCAPE,
    ORIENTATIONS,
    PORTRAIT,
    PanelConfiguration,
    PanelPlacement,
    PanelPolygon,
    RoofSegmentStats,
)
from core.errors import InvalidInput

from .geometry import compute_offset, corner_bearing_deg
from .palette import color_from_ramp, hex_ramp
from .palettes import PANELS, get_palette

Segments = Union[Mapping[int, RoofSegmentStats], Sequence[RoofSegmentStats]]


# -----------------------------
# Helpers
# -----------------------------

def _corners(width_m: float, height_m: float) -> List[tuple[float, float]]:
    w, h = width_m / 2, height_m / 2
    return [
        (+w, +h),  # sup. derecha
        (+w, -h),  # inf. derecha
        (-w, -h),  # inf. izquierda
        (-w, +h),  # sup. izquierda
    ]


def _segment(segments: Segments, index: int) -> RoofSegmentStats:
    if isinstance(index, bool) or index < 0:
        raise InvalidInput(f"roof_segment_index inválido: {index}")
    try:
        return segments[index]
    except (KeyError, IndexError):
        raise InvalidInput(f"Segmento de techo no existe: {index}") from None


def _rotation_deg(panel: PanelPlacement, override: Optional[str]) -> float:
    orientation = override or panel.orientation or LANDSCAPE
    if orientation not in ORIENTATIONS:
        raise InvalidInput(f"Orientación inválida: {orientation!r}")
    return 90.0 if orientation == PORTRAIT else 0.0


def panel_footprint(
    panel: PanelPlacement,
    azimuth_deg: float,
    panel_width_m: float,
    panel_height_m: float,
    rotation_deg: float = 0.0,
) -> tuple:
    center = (panel.center_lat, panel.center_lng)
    ring = []
    for x, y in _corners(panel_width_m, panel_height_m):
        distance = math.sqrt(x * x + y * y)
        bearing = corner_bearing_deg(x, y) + rotation_deg + panel.orientation_degrees + azimuth_deg
        ring.append(compute_offset(center, distance, bearing))
    ring.append(ring[0])
    return tuple(ring)


# ==========================================================
# API pública
# ==========================================================

def panels_for_configuration(panels: Sequence[PanelPlacement], config: PanelConfiguration) -> List[PanelPlacement]:
    """Los primeros panels_count paneles (la lista viene de mayor a menor energía)."""
    return list(panels[: max(0, int(config.panels_count))])


def place_panels(
    panels: Sequence[PanelPlacement],
    segments: Segments,
    panel_width_m: float,
    panel_height_m: float,
    orientation: Optional[str] = None,
    palette: Optional[Sequence[str]] = None,
    *,
    stroke_color: str = "#B0BEC5",
    stroke_opacity: float = 0.9,
    fill_opacity: float = 0.9,
    max_energy: Optional[float] = None,
    min_energy: Optional[float] = None,
) -> List[PanelPolygon]:
    """
    Huella geográfica + color de cada panel.

    - orientation ("PORTRAIT"/"LANDSCAPE") reemplaza la orientación de cada panel.
    - max/min de energía: primer y último panel (el llamador los entrega ordenados),
      salvo que max_energy/min_energy fijen el rango (p.ej. el techo completo).
    """
    if panel_width_m <= 0 or panel_height_m <= 0:
        raise InvalidInput("panel_width_m y panel_height_m deben ser > 0")
    if not panels:
        return []

    ramp = hex_ramp(palette if palette is not None else get_palette(PANELS))
    if max_energy is None:
        max_energy = panels[0].yearly_energy_dc_kwh
    if min_energy is None:
        min_energy = panels[-1].yearly_energy_dc_kwh

    out: List[PanelPolygon] = []
    for panel in panels:
        azimuth = _segment(segments, panel.roof_segment_index).azimuth_degrees
        points = panel_footprint(
            panel,
            azimuth,
            panel_width_m,
            panel_height_m,
            rotation_deg=_rotation_deg(panel, orientation),
        )
        out.append(PanelPolygon(
            points=points,
            fill_color=color_from_ramp(panel.yearly_energy_dc_kwh, max_energy, min_energy, ramp),
            roof_segment_index=panel.roof_segment_index,
            yearly_energy_dc_kwh=panel.yearly_energy_dc_kwh,
            stroke_color=stroke_color,
            stroke_opacity=stroke_opacity,
            fill_opacity=fill_opacity,
        ))
    return out
