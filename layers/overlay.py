# layers/overlay.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from core.errors import InvalidInput
from layout.palettes import BINARY, IRON, RAINBOW, SUNLIGHT, get_palette

from .animation import AnimationScheduler


class OverlayKind(str, Enum):
    NONE = "none"
    MASK = "mask"
    DSM = "dsm"
    RGB = "rgb"
    ANNUAL_FLUX = "annualFlux"
    MONTHLY_FLUX = "monthlyFlux"
    HOURLY_SHADE = "hourlyShade"


@dataclass(frozen=True)
class OverlaySpec:
    name: str
    palette_id: Optional[str]
    animation_bound: Optional[int]      # 12 meses / 24 horas; None = estática
    initial_index: int
    roof_only: bool
    min_label: str = ""
    max_label: str = ""

    @property
    def palette(self) -> Tuple[str, ...]:
        if self.palette_id is None:
            return ()
        return get_palette(self.palette_id)


# ==========================================================
# Tabla cerrada de tipos de capa
# ==========================================================

_SPECS: Dict[OverlayKind, OverlaySpec] = {
    OverlayKind.NONE: OverlaySpec("Sin capa", None, None, 0, False),
    OverlayKind.MASK: OverlaySpec("Techos", BINARY, None, 0, False, "Sin techo", "Techo"),
    OverlayKind.DSM: OverlaySpec("Modelo digital de superficie", RAINBOW, None, 0, False, "Bajo", "Alto"),
    OverlayKind.RGB: OverlaySpec("Imagen aérea", None, None, 0, False),
    OverlayKind.ANNUAL_FLUX: OverlaySpec(
        "Flujo solar anual", IRON, None, 0, True, "Irradiancia baja", "Irradiancia alta"
    ),
    OverlayKind.MONTHLY_FLUX: OverlaySpec(
        "Flujo solar mensual", IRON, 12, 0, True, "Irradiancia baja", "Irradiancia alta"
    ),
    OverlayKind.HOURLY_SHADE: OverlaySpec("Sombra por hora", SUNLIGHT, 24, 5, True, "Sombra", "Sol"),
}


def _kind(kind: OverlayKind | str) -> OverlayKind:
    try:
        return OverlayKind(kind)
    except ValueError:
        raise InvalidInput(f"Tipo de capa desconocido: {kind!r}") from None


# ==========================================================
# API pública
# ==========================================================

def overlay_spec(kind: OverlayKind | str) -> OverlaySpec:
    return _SPECS[_kind(kind)]


def is_animated(kind: OverlayKind | str) -> bool:
    return overlay_spec(kind).animation_bound is not None


def visible_overlays(kind: OverlayKind | str, count: int, index: int) -> List[bool]:
    """
    Qué overlays se muestran: en capas animadas solo el del índice actual,
    en capas estáticas solo el primero.
    """
    k = _kind(kind)
    if count < 0:
        raise InvalidInput("count debe ser >= 0")
    if k is OverlayKind.NONE:
        return [False] * count
    shown = index if is_animated(k) else 0
    return [i == shown for i in range(count)]


def scheduler_for(kind: OverlayKind | str, **kwargs) -> AnimationScheduler:
    spec = overlay_spec(kind)
    if spec.animation_bound is None:
        raise InvalidInput(f"La capa {spec.name!r} no es animada")
    return AnimationScheduler(index=spec.initial_index, **kwargs)
