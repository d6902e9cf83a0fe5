"""
Extraction Package

Turns parsed map documents into scenes.
Each section of a map has its own extractor; MapLoader runs them in order.
"""

from .extractors import (
    extract_spawn,
    extract_door,
    extract_models,
    extract_lights,
    extract_walls,
    extract_triggers,
)
from .map_loader import MapLoader
