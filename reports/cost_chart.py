# reports/cost_chart.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt

from core.domain.model import FinancialProjection

logger = logging.getLogger(__name__)


def generar_cost_chart(
    projection: FinancialProjection,
    out_path: Union[str, Path],
    *,
    start_year: Optional[int] = None,
    titulo: Optional[str] = None,
) -> str:
    """
    PNG con el costo acumulado con y sin solar.
    El eje X arranca en start_year con ambos acumulados en 0.
    """
    n = len(projection.cumulative_cost_with_solar)
    x0 = int(start_year) if start_year is not None else 0
    xs = [x0 + i for i in range(n + 1)]

    con_solar = [0.0, *projection.cumulative_cost_with_solar]
    sin_solar = [0.0, *projection.cumulative_cost_without_solar]

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    fig = plt.figure(figsize=(7.0, 4.0), dpi=160)
    ax = fig.add_subplot(111)
    ax.plot(xs, con_solar, marker="o", label="Solar")
    ax.plot(xs, sin_solar, marker="o", label="Sin solar")

    if projection.break_even_year is not None:
        be = xs[projection.break_even_year + 1]
        ax.axvline(be, color="#9E9E9E", linestyle="--", linewidth=1)
        ax.text(be, max(con_solar[-1], sin_solar[-1]), f" break-even {be}", fontsize=8, color="#344054")

    ax.set_title(titulo or f"Análisis de costo a {n} años")
    ax.legend()
    fig.tight_layout()
    fig.savefig(out)
    plt.close(fig)

    logger.debug("Gráfico de costos generado en %s", out)
    return str(out)
