from .finance import break_even_calendar_year, project_all_configurations, project_financials
from .sizing import achievable_ac_kwh, select_configuration, yearly_consumption_kwh

__all__ = [
    "select_configuration",
    "achievable_ac_kwh",
    "yearly_consumption_kwh",
    "project_financials",
    "project_all_configurations",
    "break_even_calendar_year",
]
