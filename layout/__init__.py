# API pública de layout (huellas de paneles y colores)

from .geometry import bounding_radius_m, compute_distance_between, compute_offset
from .palette import color_for, create_palette, hex_ramp, normalize, rgb_to_color
from .palettes import BINARY, IRON, PANELS, RAINBOW, SUNLIGHT, get_palette, palette_ids
from .placement import panels_for_configuration, place_panels

__all__ = [
    # geometría
    "compute_offset",
    "compute_distance_between",
    "bounding_radius_m",

    # paletas
    "color_for",
    "create_palette",
    "hex_ramp",
    "normalize",
    "rgb_to_color",
    "get_palette",
    "palette_ids",
    "PANELS",
    "IRON",
    "SUNLIGHT",
    "BINARY",
    "RAINBOW",

    # colocación
    "place_panels",
    "panels_for_configuration",
]
