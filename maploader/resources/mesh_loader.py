"""
Mesh loading and box generation for map entities.

Named meshes are read from the data root with Open3D. Walls and triggers get
procedurally generated boxes sized from their scale.
"""
from pathlib import Path
from typing import Dict, Optional

import numpy as np
import open3d as o3d

from ..errors import MalformedElementError, ResourceError
from ..scene.data_types import Mesh, Vector3
from ..utils import logDebug


class MeshLoader:
    """Loads named meshes and creates portal boxes, caching both."""

    def __init__(self, mesh_dir: Path):
        """
        Args:
            mesh_dir: Directory mesh identifiers are relative to
        """
        self.mesh_dir = Path(mesh_dir)
        self._meshes: Dict[str, o3d.geometry.TriangleMesh] = {}
        self._boxes: Dict[Vector3, o3d.geometry.TriangleMesh] = {}
        self._placeholder: Optional[o3d.geometry.TriangleMesh] = None

    def get_mesh(self, identifier: str) -> Mesh:
        """
        Resolve a mesh identifier.

        Args:
            identifier: File name relative to the mesh directory, e.g. "Door.obj"

        Raises:
            ResourceError: If the file is missing or holds no geometry
        """
        geometry = self._meshes.get(identifier)
        if geometry is None:
            geometry = self._load_mesh(identifier)
            self._meshes[identifier] = geometry
        return Mesh(name=identifier, geometry=geometry)

    def get_portal_box(self, entity) -> Mesh:
        """
        Create a box mesh matching an entity's scale.

        The box is centred on the origin with extents equal to entity.scale and
        carries a UV map, so the entity's texture tiling applies to it.

        Args:
            entity: Any object with a scale vector (Entity or Trigger)

        Raises:
            MalformedElementError: If a scale component is not a positive finite number
        """
        size = tuple(float(v) for v in entity.scale)
        if not all(np.isfinite(v) and v > 0 for v in size):
            raise MalformedElementError(f"Cannot build a box with scale {size}")

        box = self._boxes.get(size)
        if box is None:
            box = self._create_box(size)
            self._boxes[size] = box
        return Mesh(name=None, geometry=box, generated=True, size=size)

    def get_placeholder(self) -> Mesh:
        """Return the unit box used for absent identifiers."""
        if self._placeholder is None:
            self._placeholder = self._create_box((1.0, 1.0, 1.0))
        return Mesh(name=None, geometry=self._placeholder, generated=True, size=(1.0, 1.0, 1.0))

    def _load_mesh(self, identifier: str) -> o3d.geometry.TriangleMesh:
        """Read one mesh file."""
        filepath = self.mesh_dir / identifier
        if not filepath.is_file():
            raise ResourceError(f"Mesh not found: {filepath}")

        mesh = o3d.io.read_triangle_mesh(str(filepath))
        if not mesh.has_triangles():
            raise ResourceError(f"Mesh has no triangles: {filepath}")

        if not mesh.has_vertex_normals():
            mesh.compute_vertex_normals()

        logDebug(f"Loaded mesh {identifier}: {len(mesh.vertices)} vertices, "
                 f"{len(mesh.triangles)} triangles")
        return mesh

    @staticmethod
    def _create_box(size: Vector3) -> o3d.geometry.TriangleMesh:
        """Create a UV-mapped box of the given extents centred on the origin."""
        width, height, depth = size
        box = o3d.geometry.TriangleMesh.create_box(
            width=width, height=height, depth=depth, create_uv_map=True
        )
        # Center the box on origin
        box.translate(np.array([-width / 2, -height / 2, -depth / 2]))
        box.compute_vertex_normals()
        return box

    def __len__(self) -> int:
        """Return the number of cached named meshes."""
        return len(self._meshes)
