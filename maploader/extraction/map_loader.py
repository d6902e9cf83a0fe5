#!/usr/bin/env python3
"""
Map Loader

Turns a map document into a Scene.

Pipeline (per get_scene call):
1. Resolve the map path against the data root and parse it
2. Run the section extractors in order:
   spawn, door, models, lights, walls, triggers
3. Return the finished Scene

Any failure aborts the load; a partial Scene is never returned.
"""

from pathlib import Path
from typing import Optional, Union

from ..config import LoaderConfig
from ..errors import MapLoadError
from ..parsers import load_map_document
from ..resources import MeshLoader, ResourceResolver, TextureLoader
from ..scene.data_types import Scene
from ..utils import log, logError
from .extractors import (
    extract_door,
    extract_lights,
    extract_models,
    extract_spawn,
    extract_triggers,
    extract_walls,
)


class MapLoader:
    """
    Loads maps in XML format.

    Holds only configuration and resource loaders. Per-load state lives in
    get_scene, so one MapLoader can load any number of maps.

    Usage:
        loader = MapLoader(load_config("maploader.ini"))
        scene = loader.get_scene("maps/n1.xml")
    """

    def __init__(self, config: Optional[LoaderConfig] = None,
                 textures=None, meshes=None):
        """
        Initialize loader

        Args:
            config: Loader configuration (defaults when None)
            textures: Texture loader, defaults to a TextureLoader on the config's texture dir
            meshes: Mesh loader, defaults to a MeshLoader on the config's mesh dir
        """
        self.config = config if config is not None else LoaderConfig()

        if textures is None:
            textures = TextureLoader(self.config.get_texture_dir())
        if meshes is None:
            meshes = MeshLoader(self.config.get_mesh_dir())

        self.resources = ResourceResolver(textures, meshes, strict=self.config.strict_assets)

    def get_scene(self, path: Union[str, Path]) -> Scene:
        """
        Get a scene from a map file.

        Args:
            path: Map path relative to the data root

        Returns:
            Fully populated Scene

        Raises:
            MapLoadError: If the map cannot be loaded (see maploader.errors)
        """
        root = load_map_document(path, self.config.get_data_dir())

        # Document errors are reported by load_map_document itself
        try:
            scene = self.extract_scene(root)
        except MapLoadError as e:
            logError(f"{path}: {e}")
            raise

        log(f"File loaded: {path}")
        return scene

    def extract_scene(self, root) -> Scene:
        """Run every section extractor against an already parsed root element."""
        scene = Scene()

        extract_spawn(root, scene)
        extract_door(root, scene, self.resources)
        extract_models(root, scene, self.resources)
        extract_lights(root, scene, require=self.config.require_lights)
        extract_walls(root, scene, self.resources)
        extract_triggers(root, scene, self.resources, walk=self.config.trigger_walk)

        return scene
