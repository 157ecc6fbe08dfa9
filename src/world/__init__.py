"""World package: re-export common symbols for simpler imports.

Callers can import public types from `world` directly, e.g.:

    from world import WorldScene, WorldRenderer, Vehicle

The implementation files remain under `world/*.py`.
"""

from .patterns import BackgroundSkyscraper, DecorationItem
from .vehicle import Vehicle
from .race import RaceProgress
from .world_renderer import WorldRenderer, StreetMetrics
from .world_hud import WorldHUD
from .world_shade_overlay import WorldShadeOverlay
from .worldscene import WorldScene

__all__ = [
    "BackgroundSkyscraper",
    "DecorationItem",
    "Vehicle",
    "RaceProgress",
    "WorldRenderer",
    "StreetMetrics",
    "WorldHUD",
    "WorldShadeOverlay",
    "WorldScene",
]
