# core/domain/model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

LatLng = Tuple[float, float]

PORTRAIT = "PORTRAIT"
LANDSCAPE = "LANDSCAPE"
ORIENTATIONS = (PORTRAIT, LANDSCAPE)


# =============================
# Datos del edificio (entrada externa)
# =============================

@dataclass(frozen=True)
class PanelConfiguration:
    panels_count: int
    yearly_energy_dc_kwh: float       # kWh DC/año con la potencia por defecto del edificio


@dataclass(frozen=True)
class PanelPlacement:
    center_lat: float
    center_lng: float
    orientation_degrees: float
    roof_segment_index: int
    yearly_energy_dc_kwh: float
    orientation: str = LANDSCAPE      # "PORTRAIT" | "LANDSCAPE"


@dataclass(frozen=True)
class RoofSegmentStats:
    azimuth_degrees: float
    pitch_degrees: float = 0.0
    area_m2: float = 0.0


@dataclass(frozen=True)
class BoundingBox:
    ne: LatLng
    sw: LatLng


@dataclass(frozen=True)
class BuildingInsights:
    configs: List[PanelConfiguration]
    panels: List[PanelPlacement]      # ordenados de mayor a menor energía
    segments: List[RoofSegmentStats]
    panel_width_m: float
    panel_height_m: float
    panel_capacity_watts: float
    center: Optional[LatLng] = None
    bounding_box: Optional[BoundingBox] = None


# =============================
# Finanzas
# =============================

@dataclass(frozen=True)
class FinancialInputs:
    monthly_bill: float = 300.0
    cost_per_kwh: float = 0.31
    panel_capacity_watts: float = 400.0
    dc_to_ac_derate: float = 0.85             # 0..1
    incentives: float = 7000.0
    cost_per_watt: float = 4.0
    lifespan_years: int = 20
    efficiency_retention: float = 0.995       # factor anual (1.0 = sin degradación)
    cost_increase_factor: float = 1.022       # factor anual (1.0 = sin inflación)
    discount_factor: float = 1.04             # factor anual (1.0 = sin descuento)
    default_panel_capacity_watts: float = 400.0

    @property
    def capacity_ratio(self) -> float:
        return self.panel_capacity_watts / self.default_panel_capacity_watts


@dataclass(frozen=True)
class FinancialProjection:
    installation_size_kw: float
    installation_cost: float
    initial_ac_kwh: float
    yearly_consumption_kwh: float
    yearly_production_ac_kwh: Tuple[float, ...]
    yearly_utility_bill: Tuple[float, ...]
    yearly_cost_without_solar: Tuple[float, ...]
    cumulative_cost_with_solar: Tuple[float, ...]
    cumulative_cost_without_solar: Tuple[float, ...]
    total_cost_with_solar: float
    total_cost_without_solar: float
    savings: float
    break_even_year: Optional[int]
    energy_covered: float


# =============================
# Visualización
# =============================

@dataclass(frozen=True)
class PanelPolygon:
    points: Tuple[LatLng, ...]        # anillo cerrado: 5 puntos, el primero repetido
    fill_color: str
    roof_segment_index: int
    yearly_energy_dc_kwh: float
    stroke_color: str = "#B0BEC5"
    stroke_opacity: float = 0.9
    stroke_weight: float = 1.0
    fill_opacity: float = 0.9


@dataclass(frozen=True)
class AnimationState:
    index: int
    bound: int
    playing: bool


# =============================
# Resultado de comparación
# =============================

@dataclass(frozen=True)
class InstallationComparison:
    config_index: int
    config: PanelConfiguration
    projection: FinancialProjection
    polygons: List[PanelPolygon] = field(default_factory=list)
