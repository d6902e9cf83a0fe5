"""
Resource resolution for the section extractors.

ResourceResolver is the single place that decides what an absent texture or
mesh identifier means. Extractors pass identifiers straight through, None
included, and never check for missing values themselves.
"""
from typing import Optional

from ..errors import ResourceError
from ..scene.data_types import Mesh, Texture
from ..utils import logWarning


class ResourceResolver:
    """
    Maps identifiers to textures and meshes through the configured loaders.

    Absent identifiers (None):
    - non-strict: a placeholder texture or mesh, with a warning
    - strict: ResourceError

    Usage:
        resolver = ResourceResolver(TextureLoader(tex_dir), MeshLoader(mesh_dir))
        door_texture = resolver.texture("Door.png")
        wall_mesh = resolver.portal_box(wall)
    """

    def __init__(self, textures, meshes, strict: bool = False):
        """
        Args:
            textures: Object providing get_texture(identifier) and get_placeholder()
            meshes: Object providing get_mesh(identifier), get_portal_box(entity)
                    and get_placeholder()
            strict: Fail on absent identifiers instead of substituting placeholders
        """
        self.textures = textures
        self.meshes = meshes
        self.strict = strict

    def texture(self, identifier: Optional[str], context: str = "") -> Texture:
        """Resolve a texture identifier, applying the absent-identifier policy."""
        if identifier is None:
            return self._absent("texture", context, self.textures.get_placeholder)
        return self.textures.get_texture(identifier)

    def mesh(self, identifier: Optional[str], context: str = "") -> Mesh:
        """Resolve a mesh identifier, applying the absent-identifier policy."""
        if identifier is None:
            return self._absent("mesh", context, self.meshes.get_placeholder)
        return self.meshes.get_mesh(identifier)

    def portal_box(self, entity) -> Mesh:
        """Generate a box mesh sized from an entity's scale."""
        return self.meshes.get_portal_box(entity)

    def _absent(self, kind: str, context: str, placeholder):
        where = f" for {context}" if context else ""
        if self.strict:
            raise ResourceError(f"No {kind} specified{where}")
        logWarning(f"No {kind} specified{where}, using placeholder")
        return placeholder()
