# API pública de capas animadas / overlays

from .animation import AnimationScheduler
from .overlay import OverlayKind, OverlaySpec, is_animated, overlay_spec, scheduler_for, visible_overlays
from .raster import raster_stats, render_palette

__all__ = [
    "AnimationScheduler",
    "OverlayKind",
    "OverlaySpec",
    "overlay_spec",
    "is_animated",
    "visible_overlays",
    "scheduler_for",
    "raster_stats",
    "render_palette",
]
