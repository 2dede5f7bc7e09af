# core/calculate.py
from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Dict, Optional

from .building_mapper import building_from_dict
from .configuration import default_financial_inputs, load_configuration
from .orchestrator import compare_installation
from .services.finance import break_even_calendar_year

from layout.palettes import get_palette
from reports.cost_chart import generar_cost_chart
from reports.panel_layout import generar_panel_layout

logger = logging.getLogger(__name__)

OUT_DIR = Path(__file__).resolve().parents[1] / "salidas"


def _money(x: float) -> str:
    return f"$ {x:,.2f}"


def report_paths(out_dir: Optional[Path] = None) -> Dict[str, Path]:
    """Crea la carpeta de salida y devuelve las rutas de los PNG."""
    base = Path(out_dir) if out_dir else OUT_DIR
    base.mkdir(parents=True, exist_ok=True)
    return {
        "cost_chart": base / "fv_cost_chart.png",
        "panel_layout": base / "fv_panel_layout.png",
    }


def _edificio_ejemplo() -> dict:
    paneles = []
    for i in range(8):
        fila, col = divmod(i, 4)
        paneles.append({
            "center": {"latitude": 37.4450 + fila * 0.000018, "longitude": -122.1390 + col * 0.000013},
            "orientation": "LANDSCAPE",
            "segmentIndex": 0 if fila == 0 else 1,
            "yearlyEnergyDcKwh": 520.0 - i * 12.5,
        })
    return {
        "center": {"latitude": 37.4450, "longitude": -122.1390},
        "boundingBox": {
            "ne": {"latitude": 37.4452, "longitude": -122.1387},
            "sw": {"latitude": 37.4448, "longitude": -122.1393},
        },
        "solarPotential": {
            "panelCapacityWatts": 400,
            "panelWidthMeters": 1.045,
            "panelHeightMeters": 1.879,
            "roofSegmentStats": [
                {"azimuthDegrees": 180.0, "pitchDegrees": 22.0, "stats": {"areaMeters2": 48.0}},
                {"azimuthDegrees": 0.0, "pitchDegrees": 22.0, "stats": {"areaMeters2": 48.0}},
            ],
            "solarPanelConfigs": [
                {"panelsCount": 4, "yearlyEnergyDcKwh": 2005.0},
                {"panelsCount": 6, "yearlyEnergyDcKwh": 2960.0},
                {"panelsCount": 8, "yearlyEnergyDcKwh": 3870.0},
            ],
            "solarPanels": paneles,
        },
    }


def main(out_dir: Optional[Path] = None) -> Dict[str, Path]:
    cfg = load_configuration()
    inputs = default_financial_inputs(cfg)
    building = building_from_dict(_edificio_ejemplo())

    style = cfg.panel_style
    resultado = compare_installation(
        building,
        inputs,
        palette=get_palette(str(style.get("palette", "panels"))),
        panel_style=style,
    )

    p = resultado.projection
    anio = date.today().year
    logger.info("Configuración #%s: %s paneles (%.2f kW)", resultado.config_index,
                resultado.config.panels_count, p.installation_size_kw)
    logger.info("Costo con solar: %s | sin solar: %s | ahorro: %s",
                _money(p.total_cost_with_solar), _money(p.total_cost_without_solar), _money(p.savings))
    logger.info("Break-even: %s", break_even_calendar_year(p, anio) or "no ocurre en la vida útil")

    paths = report_paths(out_dir)
    generar_cost_chart(p, paths["cost_chart"], start_year=anio)
    generar_panel_layout(resultado.polygons, paths["panel_layout"])
    logger.info("Reportes en %s", paths["cost_chart"].parent)
    return paths


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    main()
