# layers/raster.py
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from core.errors import InvalidInput
from layout.palette import hex_ramp, ramp_index

Grid = Sequence[Sequence[float]]


def _is_no_data(value: float, no_data: Optional[float]) -> bool:
    if value != value:  # NaN
        return True
    return no_data is not None and value == no_data


def raster_stats(values: Grid, no_data: Optional[float] = None) -> Tuple[float, float]:
    """(min, max) ignorando celdas sin dato."""
    valid = [v for row in values for v in row if not _is_no_data(v, no_data)]
    if not valid:
        raise InvalidInput("El raster no tiene celdas válidas")
    return min(valid), max(valid)


def render_palette(
    values: Grid,
    palette: Sequence[str],
    min_value: float = 0.0,
    max_value: float = 1.0,
    mask: Optional[Grid] = None,
    no_data: Optional[float] = None,
) -> List[List[Optional[str]]]:
    """
    Colorea cada celda con la rampa de la paleta.
    Celdas con máscara 0 o sin dato quedan en None (transparentes).
    """
    if mask is not None and (
        len(mask) != len(values) or any(len(m) != len(v) for m, v in zip(mask, values))
    ):
        raise InvalidInput("mask debe tener las mismas dimensiones que values")

    ramp = hex_ramp(palette)
    span = max_value - min_value

    out: List[List[Optional[str]]] = []
    for r, row in enumerate(values):
        line: List[Optional[str]] = []
        for c, v in enumerate(row):
            if (mask is not None and mask[r][c] == 0) or _is_no_data(v, no_data):
                line.append(None)
                continue
            # mismo criterio que la paleta de paneles: rango degenerado -> extremo alto
            n = 1.0 if span == 0 else max(0.0, min(1.0, (v - min_value) / span))
            line.append(ramp[ramp_index(n, len(ramp))])
        out.append(line)
    return out
