"""
Data types for loaded scenes.

Contains the dataclasses produced by the extraction passes. Vectors are plain
(x, y, z) float tuples. Backend handles (decoded images, triangle meshes) are
excluded from equality so two loads of the same map compare equal.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

Vector3 = Tuple[float, float, float]

ZERO: Vector3 = (0.0, 0.0, 0.0)
UNIT: Vector3 = (1.0, 1.0, 1.0)


@dataclass
class Texture:
    """Decoded texture plus the UV tiling to draw it with."""
    name: Optional[str]  # None for the placeholder texture
    image: Any = field(default=None, compare=False, repr=False)
    width: int = 0
    height: int = 0
    x_tiling: float = 1.0
    y_tiling: float = 1.0


@dataclass
class Mesh:
    """Loaded or generated triangle mesh."""
    name: Optional[str]  # Asset identifier, None when generated
    geometry: Any = field(default=None, compare=False, repr=False)
    generated: bool = False
    # Box extents for generated meshes
    size: Optional[Vector3] = None


@dataclass
class Player:
    """Spawn transform of the player."""
    position: Vector3 = ZERO
    rotation: Vector3 = ZERO


@dataclass
class Entity:
    """Generic placed object."""
    position: Vector3 = ZERO
    rotation: Vector3 = ZERO
    scale: Vector3 = UNIT
    texture: Optional[Texture] = None
    mesh: Optional[Mesh] = None


@dataclass
class Trigger:
    """Typed gameplay volume. The type string is opaque to the loader."""
    type: str
    position: Vector3 = ZERO
    scale: Vector3 = UNIT
    texture: Optional[Texture] = None
    mesh: Optional[Mesh] = None


@dataclass
class Light:
    """Point light. Color components are r, g, b in [0, 1]."""
    position: Vector3 = ZERO
    color: Vector3 = ZERO


@dataclass
class Scene:
    """Everything one map load produces."""
    player: Player = field(default_factory=Player)
    end: Optional[Entity] = None
    lights: List[Light] = field(default_factory=list)
    walls: List[Entity] = field(default_factory=list)
    triggers: List[Trigger] = field(default_factory=list)
    models: List[Entity] = field(default_factory=list)
