# core/services/sizing.py
from __future__ import annotations

from typing import Sequence

from core.domain.model import PanelConfiguration
from core.errors import DivisionByZero, InvalidInput
from core.validation import validate_configurations, validate_selection_factors


# ==========================================================
# Helpers mínimos
# ==========================================================

def achievable_ac_kwh(config: PanelConfiguration, capacity_ratio: float, dc_to_ac_derate: float) -> float:
    return config.yearly_energy_dc_kwh * capacity_ratio * dc_to_ac_derate


def yearly_consumption_kwh(monthly_bill: float, cost_per_kwh: float) -> float:
    if cost_per_kwh == 0:
        raise DivisionByZero("cost_per_kwh no puede ser 0")
    if monthly_bill < 0 or cost_per_kwh < 0:
        raise InvalidInput("monthly_bill y cost_per_kwh deben ser positivos")
    return (monthly_bill / cost_per_kwh) * 12


# ==========================================================
# API pública: selección de configuración
# ==========================================================

def select_configuration(
    configs: Sequence[PanelConfiguration],
    yearly_consumption_kwh: float,
    capacity_ratio: float,
    dc_to_ac_derate: float,
) -> int:
    """
    Devuelve el índice de la configuración más pequeña que cubre la demanda.

    - Recorre en orden ascendente; el primero con AC alcanzable >= demanda gana.
    - Si ninguna alcanza, devuelve el último índice (la mayor instalación).
    - No reordena ni verifica monotonía de la entrada.
    """
    validate_configurations(configs)
    validate_selection_factors(yearly_consumption_kwh, capacity_ratio, dc_to_ac_derate)

    for i, config in enumerate(configs):
        if achievable_ac_kwh(config, capacity_ratio, dc_to_ac_derate) >= yearly_consumption_kwh:
            return i
    return len(configs) - 1
