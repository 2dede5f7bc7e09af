# layout/palette.py
from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from matplotlib.colors import is_color_like, to_rgb

from core.errors import InvalidInput

RGB = Tuple[float, float, float]

RAMP_SIZE = 256


# ==========================================================
# Conversión de colores
# ==========================================================

def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def color_to_rgb(color: str) -> RGB:
    """
    Acepta '#RRGGBB', 'RRGGBB' (formato de los catálogos) o cualquier nombre
    de color de matplotlib. Devuelve componentes en escala 0..255.
    """
    c = str(color).strip()
    if not c.startswith("#") and len(c) == 6 and is_color_like("#" + c):
        c = "#" + c
    if not is_color_like(c):
        raise InvalidInput(f"Color inválido: {color!r}")
    r, g, b = to_rgb(c)
    return r * 255, g * 255, b * 255


def rgb_to_color(rgb: RGB) -> str:
    return "#" + "".join(f"{max(0, min(255, _round_half_up(v))):02x}" for v in rgb)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


# ==========================================================
# API pública
# ==========================================================

def create_palette(colors: Sequence[str], size: int = RAMP_SIZE) -> List[RGB]:
    """
    Rampa de `size` entradas interpolando linealmente entre colores de control
    equiespaciados: la entrada i cae en la posición i/(size-1) de la paleta.
    """
    if len(colors) < 2:
        raise InvalidInput("La paleta necesita al menos 2 colores")
    if size < 2:
        raise InvalidInput("size debe ser >= 2")

    rgb = [color_to_rgb(c) for c in colors]
    last = len(rgb) - 1
    step = last / (size - 1)

    ramp: List[RGB] = []
    for i in range(size):
        pos = min(i * step, float(last))
        lower = int(math.floor(pos))
        upper = int(math.ceil(pos))
        t = pos - lower
        lo, hi = rgb[lower], rgb[upper]
        ramp.append((_lerp(lo[0], hi[0], t), _lerp(lo[1], hi[1], t), _lerp(lo[2], hi[2], t)))
    return ramp


def normalize(value: float, max_value: float, min_value: float) -> float:
    if max_value == min_value:
        return 1.0
    y = (value - min_value) / (max_value - min_value)
    return max(0.0, min(1.0, y))


def ramp_index(normalized: float, size: int = RAMP_SIZE) -> int:
    idx = _round_half_up(normalized * (size - 1))
    return max(0, min(size - 1, idx))


def color_from_ramp(value: float, max_value: float, min_value: float, ramp: Sequence[str]) -> str:
    return ramp[ramp_index(normalize(value, max_value, min_value), len(ramp))]


def hex_ramp(colors: Sequence[str], size: int = RAMP_SIZE) -> List[str]:
    return [rgb_to_color(c) for c in create_palette(colors, size)]


def color_for(value: float, max_value: float, min_value: float, palette: Sequence[str]) -> str:
    """Color '#rrggbb' del valor dentro de [min_value, max_value] sobre la rampa de 256 tonos."""
    return color_from_ramp(value, max_value, min_value, hex_ramp(palette))
