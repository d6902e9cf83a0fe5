import pytest

from conftest import make_map
from maploader.errors import ResourceError
from maploader.utils import get_counts


def test_models_read_their_own_assets(loader, write_map):
    body = """
        <model texture="crate.png" mesh="crate.obj">
          <position x="1" y="0" z="2"/>
          <rotation x="0" y="45" z="0"/>
        </model>
        <model texture="lamp.png" mesh="lamp.obj">
          <position x="3" y="1" z="4"/>
        </model>
    """
    scene = loader.get_scene(write_map(make_map(body)))

    assert [(m.texture.name, m.mesh.name) for m in scene.models] == [
        ("crate.png", "crate.obj"),
        ("lamp.png", "lamp.obj"),
    ]
    assert scene.models[0].position == (1.0, 0.0, 2.0)
    assert scene.models[0].rotation == (0.0, 45.0, 0.0)
    assert scene.models[1].rotation == (0.0, 0.0, 0.0)
    assert scene.models[1].scale == (1.0, 1.0, 1.0)


def test_no_models_is_valid(loader, write_map):
    scene = loader.get_scene(write_map(make_map()))
    assert scene.models == []


def test_missing_attributes_do_not_reuse_previous_model(loader, write_map):
    body = '<model texture="crate.png" mesh="crate.obj"/><model/>'
    scene = loader.get_scene(write_map(make_map(body)))
    assert scene.models[1].texture.name is None
    assert scene.models[1].mesh.name is None


def test_missing_attributes_warn(loader, write_map):
    _, warnings_before = get_counts()
    loader.get_scene(write_map(make_map('<model mesh="crate.obj"/>')))
    _, warnings_after = get_counts()
    assert warnings_after == warnings_before + 1


def test_missing_mesh_fails_in_strict_mode(make_loader, write_map):
    loader = make_loader(strict_assets=True)
    with pytest.raises(ResourceError, match="No mesh specified for model 0"):
        loader.get_scene(write_map(make_map('<model texture="crate.png"/>')))
