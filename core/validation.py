# core/validation.py
from __future__ import annotations

from typing import Sequence

from core.domain.model import FinancialInputs, PanelConfiguration
from core.errors import DivisionByZero, InvalidInput


def validate_configurations(configs: Sequence[PanelConfiguration]) -> None:
    if not configs:
        raise InvalidInput("configs no puede estar vacío")
    for i, c in enumerate(configs):
        if c.panels_count < 0:
            raise InvalidInput(f"configs[{i}].panels_count debe ser >= 0")
        if c.yearly_energy_dc_kwh < 0:
            raise InvalidInput(f"configs[{i}].yearly_energy_dc_kwh debe ser >= 0")


def validate_selection_factors(yearly_consumption_kwh: float, capacity_ratio: float, dc_to_ac_derate: float) -> None:
    if yearly_consumption_kwh < 0:
        raise InvalidInput("yearly_consumption_kwh debe ser >= 0")
    if capacity_ratio <= 0:
        raise InvalidInput("capacity_ratio debe ser > 0")
    if not (0 < dc_to_ac_derate <= 1):
        raise InvalidInput("dc_to_ac_derate debe estar en (0, 1]")


def validate_financial_inputs(p: FinancialInputs) -> None:
    # divisores primero: son un error distinto
    if p.cost_per_kwh == 0:
        raise DivisionByZero("cost_per_kwh no puede ser 0")
    if p.default_panel_capacity_watts == 0:
        raise DivisionByZero("default_panel_capacity_watts no puede ser 0")
    if p.discount_factor == 0:
        raise DivisionByZero("discount_factor no puede ser 0")

    if isinstance(p.lifespan_years, bool) or int(p.lifespan_years) != p.lifespan_years:
        raise InvalidInput("lifespan_years debe ser entero")
    if p.lifespan_years < 1:
        raise InvalidInput("lifespan_years debe ser >= 1")

    if p.cost_per_kwh < 0:
        raise InvalidInput("cost_per_kwh debe ser > 0")
    if p.default_panel_capacity_watts < 0:
        raise InvalidInput("default_panel_capacity_watts debe ser > 0")
    if p.discount_factor < 0:
        raise InvalidInput("discount_factor debe ser > 0")

    if p.monthly_bill < 0:
        raise InvalidInput("monthly_bill debe ser >= 0")
    if p.panel_capacity_watts < 0:
        raise InvalidInput("panel_capacity_watts debe ser >= 0")
    if p.cost_per_watt < 0:
        raise InvalidInput("cost_per_watt debe ser >= 0")
    if p.incentives < 0:
        raise InvalidInput("incentives debe ser >= 0")

    if not (0 < p.dc_to_ac_derate <= 1):
        raise InvalidInput("dc_to_ac_derate debe estar en (0, 1]")
    if not (0 <= p.efficiency_retention <= 1):
        raise InvalidInput("efficiency_retention debe estar en [0, 1]")
    if p.cost_increase_factor <= 0:
        raise InvalidInput("cost_increase_factor debe ser > 0")


def validate_panel_config(config: PanelConfiguration) -> None:
    if config.panels_count < 0:
        raise InvalidInput("panels_count debe ser >= 0")
    if config.yearly_energy_dc_kwh < 0:
        raise InvalidInput("yearly_energy_dc_kwh debe ser >= 0")
