from .cost_chart import generar_cost_chart
from .panel_layout import generar_panel_layout

__all__ = ["generar_cost_chart", "generar_panel_layout"]
