# layout/palettes.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from core.errors import InvalidInput

from .palette import color_to_rgb

# ==========================================================
# Catálogo base (hardcoded)
# ==========================================================

PANELS = "panels"
IRON = "iron"
SUNLIGHT = "sunlight"
BINARY = "binary"
RAINBOW = "rainbow"

_PALETTES: Dict[str, Tuple[str, ...]] = {
    PANELS: ("E8EAF6", "1A237E"),
    IRON: ("00000A", "91009C", "E64616", "FEB400", "FFFFF6"),
    SUNLIGHT: ("212121", "FFCA28"),
    BINARY: ("212121", "B3E5FC"),
    RAINBOW: ("3949AB", "81D4FA", "66BB6A", "FFE082", "E53935"),
}

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"
_YAML_PALETTES = CONFIG_DIR / "palettes.yaml"


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def _validate_palette(pid: str, colors: Any) -> Tuple[str, ...]:
    if not isinstance(colors, (list, tuple)) or len(colors) < 2:
        raise InvalidInput(f"palettes.{pid} debe ser una lista de al menos 2 colores")
    out = tuple(str(c).strip() for c in colors)
    for c in out:
        color_to_rgb(c)
    return out


def load_palettes_yaml(path: Path = _YAML_PALETTES) -> Dict[str, Tuple[str, ...]]:
    doc = _read_yaml(path)
    palettes = (doc.get("palettes") or {}) if isinstance(doc, dict) else {}
    return {str(pid): _validate_palette(str(pid), colors) for pid, colors in palettes.items()}


def _merge_palettes() -> Dict[str, Tuple[str, ...]]:
    out = dict(_PALETTES)
    out.update(load_palettes_yaml())
    return out


# ==========================================================
# API pública
# ==========================================================

def get_palette(palette_id: str) -> Tuple[str, ...]:
    palettes = _merge_palettes()
    if palette_id in palettes:
        return palettes[palette_id]
    raise KeyError(f"Paleta no existe en catálogo: {palette_id}")


def palette_ids() -> List[str]:
    return sorted(_merge_palettes().keys())
