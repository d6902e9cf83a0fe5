"""
Map loader for XML level files.

Reads a level document and builds the Scene the renderer and gameplay layer
consume: player spawn, exit door, walls, lights, triggers and models.

Usage:
    from maploader import MapLoader, load_config

    loader = MapLoader(load_config("maploader.ini"))
    scene = loader.get_scene("maps/n1.xml")
"""

from .config import LoaderConfig, TriggerWalk, load_config
from .errors import (
    MapLoadError,
    MapDocumentError,
    MissingElementError,
    MalformedElementError,
    ResourceError,
)
from .extraction import MapLoader
from .scene import Scene, Entity, Trigger, Light, Player, Texture, Mesh

__all__ = [
    'MapLoader',
    'LoaderConfig',
    'TriggerWalk',
    'load_config',
    'MapLoadError',
    'MapDocumentError',
    'MissingElementError',
    'MalformedElementError',
    'ResourceError',
    'Scene',
    'Entity',
    'Trigger',
    'Light',
    'Player',
    'Texture',
    'Mesh',
]
