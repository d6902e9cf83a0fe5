"""Scene data model produced by the map loader."""
from .data_types import Vector3, Texture, Mesh, Player, Entity, Trigger, Light, Scene

__all__ = ['Vector3', 'Texture', 'Mesh', 'Player', 'Entity', 'Trigger', 'Light', 'Scene']
