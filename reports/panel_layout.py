# reports/panel_layout.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Union

import matplotlib.pyplot as plt
from matplotlib.patches import Polygon

from core.domain.model import PanelPolygon

logger = logging.getLogger(__name__)


def generar_panel_layout(
    polygons: Sequence[PanelPolygon],
    out_path: Union[str, Path],
    *,
    titulo: str = "Arreglo FV (vista superior, color por energía anual)",
) -> str:
    """
    Vista superior referencial de las huellas calculadas.
    X = longitud, Y = latitud (sin reproyección; basta para escalas de un techo).
    """
    if not polygons:
        raise ValueError("No hay paneles para dibujar")

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    fig = plt.figure(figsize=(7.0, 7.0), dpi=170)
    ax = fig.add_subplot(111)
    ax.set_title(titulo)
    ax.set_aspect("equal")

    lats = [lat for p in polygons for lat, _ in p.points]
    lngs = [lng for p in polygons for _, lng in p.points]

    for p in polygons:
        ax.add_patch(Polygon(
            [(lng, lat) for lat, lng in p.points],
            closed=True,
            facecolor=p.fill_color,
            edgecolor=p.stroke_color,
            alpha=p.fill_opacity,
            linewidth=p.stroke_weight,
        ))

    pad_lat = (max(lats) - min(lats)) * 0.05 or 1e-6
    pad_lng = (max(lngs) - min(lngs)) * 0.05 or 1e-6
    ax.set_xlim(min(lngs) - pad_lng, max(lngs) + pad_lng)
    ax.set_ylim(min(lats) - pad_lat, max(lats) + pad_lat)

    total_kwh = sum(p.yearly_energy_dc_kwh for p in polygons)
    ax.text(
        0.02, 0.02,
        f"{len(polygons)} módulos | Energía DC anual: {total_kwh:,.0f} kWh",
        transform=ax.transAxes, ha="left", va="bottom", fontsize=8, color="#344054",
    )

    ax.set_xticks([])
    ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_visible(False)

    fig.tight_layout()
    fig.savefig(out, bbox_inches="tight")
    plt.close(fig)

    logger.debug("Layout de paneles generado en %s", out)
    return str(out)
