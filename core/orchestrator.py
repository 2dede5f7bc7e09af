# core/orchestrator.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from core.configuration import EngineConfig
from core.domain.model import BuildingInsights, FinancialInputs, FinancialProjection, InstallationComparison
from core.services.finance import project_financials
from core.services.sizing import select_configuration, yearly_consumption_kwh
from core.validation import validate_configurations, validate_financial_inputs
from layers.animation import AnimationScheduler
from layers.overlay import OverlayKind, overlay_spec, scheduler_for
from layout.placement import panels_for_configuration, place_panels

logger = logging.getLogger(__name__)


# ==========================================================
# Helpers
# ==========================================================
def _inputs_for_building(building: BuildingInsights, inputs: FinancialInputs) -> FinancialInputs:
    # la energía de las configuraciones está calculada con la potencia del edificio
    return replace(inputs, default_panel_capacity_watts=building.panel_capacity_watts)


def _energy_range(building: BuildingInsights) -> Dict[str, float]:
    if not building.panels:
        return {}
    energies = [p.yearly_energy_dc_kwh for p in building.panels]
    return {"max_energy": max(energies), "min_energy": min(energies)}


def _stroke_kwargs(panel_style: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    style = dict(panel_style or {})
    out: Dict[str, Any] = {}
    if style.get("stroke_color") is not None:
        out["stroke_color"] = str(style["stroke_color"])
    for k in ("stroke_opacity", "fill_opacity"):
        if style.get(k) is not None:
            out[k] = float(style[k])
    return out


# ==========================================================
# API pública
# ==========================================================
def compare_installation(
    building: BuildingInsights,
    inputs: FinancialInputs,
    *,
    orientation: Optional[str] = None,
    palette: Optional[Sequence[str]] = None,
    panel_style: Optional[Mapping[str, Any]] = None,
) -> InstallationComparison:
    """
    Flujo completo para un techo:
      1) consumo anual desde la factura
      2) configuración más pequeña que lo cubre
      3) proyección financiera de esa configuración
      4) huellas + color de sus paneles

    El color se escala con la energía de todos los paneles del techo, no solo
    con los de la configuración elegida. panel_style acepta stroke_color,
    stroke_opacity y fill_opacity (sección panels de visualization.yaml).
    """
    eff = _inputs_for_building(building, inputs)
    validate_financial_inputs(eff)
    validate_configurations(building.configs)

    consumption = yearly_consumption_kwh(eff.monthly_bill, eff.cost_per_kwh)
    idx = select_configuration(building.configs, consumption, eff.capacity_ratio, eff.dc_to_ac_derate)
    config = building.configs[idx]
    logger.debug("Configuración elegida idx=%s paneles=%s consumo_kwh=%.1f", idx, config.panels_count, consumption)

    projection = project_financials(config, eff)

    polygons = place_panels(
        panels_for_configuration(building.panels, config),
        building.segments,
        building.panel_width_m,
        building.panel_height_m,
        orientation=orientation,
        palette=palette,
        **_energy_range(building),
        **_stroke_kwargs(panel_style),
    )
    logger.debug("Proyección: costo_con_solar=%.2f ahorro=%.2f break_even=%s",
                 projection.total_cost_with_solar, projection.savings, projection.break_even_year)

    return InstallationComparison(
        config_index=idx,
        config=config,
        projection=projection,
        polygons=polygons,
    )


def compare_configurations(
    building: BuildingInsights,
    inputs: FinancialInputs,
) -> List[Tuple[int, FinancialProjection]]:
    """Proyección de cada configuración candidata, en el orden del edificio."""
    eff = _inputs_for_building(building, inputs)
    validate_configurations(building.configs)
    return [(i, project_financials(c, eff)) for i, c in enumerate(building.configs)]


def animate_overlay(kind: OverlayKind | str, cfg: EngineConfig, **kwargs) -> AnimationScheduler:
    """Scheduler ya corriendo para una capa animada, con el período de visualization.yaml."""
    scheduler = scheduler_for(kind, **kwargs)
    scheduler.start(cfg.animation_period_ms, overlay_spec(kind).animation_bound)
    return scheduler
