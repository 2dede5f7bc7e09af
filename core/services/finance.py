# core/services/finance.py
from __future__ import annotations

from itertools import accumulate
from typing import List, Optional, Sequence

from core.domain.model import FinancialInputs, FinancialProjection, PanelConfiguration
from core.validation import validate_configurations, validate_financial_inputs, validate_panel_config

from .sizing import achievable_ac_kwh, yearly_consumption_kwh


# ==========================================================
# 🔵 Instalación
# ==========================================================

def installation_size_kw(panels_count: int, panel_capacity_watts: float) -> float:
    return panels_count * panel_capacity_watts / 1000


def installation_cost(cost_per_watt: float, size_kw: float) -> float:
    return cost_per_watt * size_kw * 1000


# ==========================================================
# 🔵 Series anuales
# ==========================================================

def yearly_production(initial_ac_kwh: float, efficiency_retention: float, lifespan_years: int) -> List[float]:
    return [initial_ac_kwh * efficiency_retention ** year for year in range(lifespan_years)]


def yearly_utility_bills(
    production: Sequence[float],
    consumption_kwh: float,
    cost_per_kwh: float,
    cost_increase_factor: float,
    discount_factor: float,
) -> List[float]:
    bills: List[float] = []
    for year, produced in enumerate(production):
        bill_energy_kwh = consumption_kwh - produced
        estimate = bill_energy_kwh * cost_per_kwh * cost_increase_factor ** year / discount_factor ** year
        # excedente exportado no genera factura negativa
        bills.append(max(estimate, 0.0))
    return bills


def yearly_costs_without_solar(
    monthly_bill: float,
    cost_increase_factor: float,
    discount_factor: float,
    lifespan_years: int,
) -> List[float]:
    return [
        monthly_bill * 12 * cost_increase_factor ** year / discount_factor ** year
        for year in range(lifespan_years)
    ]


def _break_even(with_solar: Sequence[float], without_solar: Sequence[float]) -> Optional[int]:
    for year, (cost_solar, cost_base) in enumerate(zip(with_solar, without_solar)):
        if cost_solar <= cost_base:
            return year
    return None


# ==========================================================
# 🔵 ENTRYPOINT FINANCIERO
# ==========================================================

def project_financials(config: PanelConfiguration, inputs: FinancialInputs) -> FinancialProjection:
    """
    Proyección de costo/producción a lo largo de la vida útil.

    Todos los factores anuales son multiplicativos (1.0 = sin cambio):
      - producción[y] = AC inicial * retención^y
      - factura[y]    = max(0, (consumo - producción[y]) * costo_kwh * inflación^y / descuento^y)
      - sin solar[y]  = factura_mensual * 12 * inflación^y / descuento^y

    El acumulado con solar suma (instalación - incentivos) en el año 0.
    El break-even es el primer año en que acumulado con solar <= acumulado sin solar.
    """
    validate_panel_config(config)
    validate_financial_inputs(inputs)

    size_kw = installation_size_kw(config.panels_count, inputs.panel_capacity_watts)
    cost = installation_cost(inputs.cost_per_watt, size_kw)
    initial_ac = achievable_ac_kwh(config, inputs.capacity_ratio, inputs.dc_to_ac_derate)

    production = yearly_production(initial_ac, inputs.efficiency_retention, inputs.lifespan_years)
    consumption = yearly_consumption_kwh(inputs.monthly_bill, inputs.cost_per_kwh)

    bills = yearly_utility_bills(
        production,
        consumption,
        inputs.cost_per_kwh,
        inputs.cost_increase_factor,
        inputs.discount_factor,
    )
    total_with_solar = cost + sum(bills) - inputs.incentives

    without_solar = yearly_costs_without_solar(
        inputs.monthly_bill,
        inputs.cost_increase_factor,
        inputs.discount_factor,
        inputs.lifespan_years,
    )
    total_without_solar = sum(without_solar)

    upfront = cost - inputs.incentives
    cumulative_with = list(accumulate(
        bill + upfront if year == 0 else bill for year, bill in enumerate(bills)
    ))
    cumulative_without = list(accumulate(without_solar))

    return FinancialProjection(
        installation_size_kw=size_kw,
        installation_cost=cost,
        initial_ac_kwh=initial_ac,
        yearly_consumption_kwh=consumption,
        yearly_production_ac_kwh=tuple(production),
        yearly_utility_bill=tuple(bills),
        yearly_cost_without_solar=tuple(without_solar),
        cumulative_cost_with_solar=tuple(cumulative_with),
        cumulative_cost_without_solar=tuple(cumulative_without),
        total_cost_with_solar=total_with_solar,
        total_cost_without_solar=total_without_solar,
        savings=total_without_solar - total_with_solar,
        break_even_year=_break_even(cumulative_with, cumulative_without),
        energy_covered=production[0] / consumption if consumption > 0 else 0.0,
    )


def project_all_configurations(
    configs: Sequence[PanelConfiguration],
    inputs: FinancialInputs,
) -> List[FinancialProjection]:
    validate_configurations(configs)
    return [project_financials(c, inputs) for c in configs]


def break_even_calendar_year(projection: FinancialProjection, start_year: int) -> Optional[int]:
    # el año 0 de la proyección corresponde a start_year + 1
    if projection.break_even_year is None:
        return None
    return start_year + projection.break_even_year + 1
