import textwrap
from pathlib import Path

import pytest

from maploader.config import LoaderConfig
from maploader.extraction import MapLoader
from maploader.scene import Mesh, Texture


class RecordingTextureLoader:
    """In-memory texture loader that records every lookup."""

    def __init__(self):
        self.requests = []

    def get_texture(self, identifier):
        self.requests.append(identifier)
        return Texture(name=identifier, width=4, height=4)

    def get_placeholder(self):
        self.requests.append(None)
        return Texture(name=None, width=1, height=1)


class RecordingMeshLoader:
    """In-memory mesh loader that records every lookup."""

    def __init__(self):
        self.requests = []
        self.boxes = []

    def get_mesh(self, identifier):
        self.requests.append(identifier)
        return Mesh(name=identifier)

    def get_portal_box(self, entity):
        size = tuple(entity.scale)
        self.boxes.append(size)
        return Mesh(name=None, generated=True, size=size)

    def get_placeholder(self):
        self.requests.append(None)
        return Mesh(name=None, generated=True, size=(1.0, 1.0, 1.0))


SPAWN_AND_END = """
    <spawn>
      <position x="1" y="2" z="3"/>
      <rotation x="0" y="90" z="0"/>
    </spawn>
    <end>
      <position x="4" y="5" z="6"/>
      <rotation x="0" y="180" z="0"/>
    </end>
"""

ONE_LIGHT = '<light x="0" y="10" z="0" r="1" g="1" b="1"/>'


def make_map(body: str = "", spawn_and_end: bool = True, light: bool = True) -> str:
    """Wrap map body elements in a root, adding spawn, end and a light by default."""
    parts = []
    if spawn_and_end:
        parts.append(SPAWN_AND_END)
    if light:
        parts.append(ONE_LIGHT)
    parts.append(textwrap.dedent(body))
    return "<map>\n" + "\n".join(parts) + "\n</map>\n"


@pytest.fixture
def data_dir(tmp_path) -> Path:
    path = tmp_path / "data"
    (path / "maps").mkdir(parents=True)
    return path


@pytest.fixture
def write_map(data_dir):
    """Write map XML under data/maps and return its logical path."""
    def _write(xml: str, name: str = "test.xml") -> str:
        (data_dir / "maps" / name).write_text(xml, encoding="utf-8")
        return f"maps/{name}"
    return _write


@pytest.fixture
def textures():
    return RecordingTextureLoader()


@pytest.fixture
def meshes():
    return RecordingMeshLoader()


@pytest.fixture
def make_loader(data_dir, textures, meshes):
    """Build a MapLoader over the test data dir with recording resource loaders."""
    def _make(**config):
        return MapLoader(LoaderConfig(data_dir=data_dir, **config),
                         textures=textures, meshes=meshes)
    return _make


@pytest.fixture
def loader(make_loader):
    return make_loader()


@pytest.fixture
def asset_data_dir(data_dir):
    """Data dir with real texture and mesh files written by Open3D."""
    import numpy as np
    import open3d as o3d

    texture_dir = data_dir / "textures"
    mesh_dir = data_dir / "meshes"
    texture_dir.mkdir()
    mesh_dir.mkdir()

    pixels = np.zeros((4, 8, 3), dtype=np.uint8)
    pixels[:, :, 0] = 200
    for name in ("Door.png", "redBox.png", "wall.png"):
        assert o3d.io.write_image(str(texture_dir / name), o3d.geometry.Image(pixels))

    door = o3d.geometry.TriangleMesh.create_box(width=1.0, height=2.0, depth=0.1)
    assert o3d.io.write_triangle_mesh(str(mesh_dir / "Door.obj"), door)

    return data_dir
