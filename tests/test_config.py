import dataclasses
from pathlib import Path

import pytest

from maploader.config import LoaderConfig, TriggerWalk, load_config


def test_defaults_without_file():
    config = load_config(None)
    assert config.get_data_dir() == Path("data")
    assert config.get_texture_dir() == Path("data") / "textures"
    assert config.get_mesh_dir() == Path("data") / "meshes"
    assert config.trigger_walk is TriggerWalk.TAGGED
    assert config.strict_assets is False
    assert config.require_lights is True
    assert config.log_file is None


def test_ini_values(tmp_path):
    ini = tmp_path / "maploader.ini"
    ini.write_text("""
[paths]
data_dir = assets   ; relative to this file
textures = img
meshes = obj

[loader]
trigger_walk = Siblings
strict_assets = yes
require_lights = off
log_file = load.log
""", encoding="utf-8")

    config = load_config(ini)
    assert config.get_data_dir() == tmp_path / "assets"
    assert config.get_texture_dir() == tmp_path / "assets" / "img"
    assert config.get_mesh_dir() == tmp_path / "assets" / "obj"
    assert config.trigger_walk is TriggerWalk.SIBLINGS
    assert config.strict_assets is True
    assert config.require_lights is False
    assert config.log_file == tmp_path / "load.log"
    assert config.config_path == ini


def test_missing_sections_use_defaults(tmp_path):
    ini = tmp_path / "maploader.ini"
    ini.write_text("[loader]\nstrict_assets = true\n", encoding="utf-8")
    config = load_config(ini)
    assert config.get_data_dir() == tmp_path / "data"
    assert config.strict_assets is True


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.ini")


def test_invalid_trigger_walk(tmp_path):
    ini = tmp_path / "maploader.ini"
    ini.write_text("[loader]\ntrigger_walk = all\n", encoding="utf-8")
    with pytest.raises(ValueError, match="trigger_walk"):
        load_config(ini)


def test_invalid_boolean(tmp_path):
    ini = tmp_path / "maploader.ini"
    ini.write_text("[loader]\nrequire_lights = maybe\n", encoding="utf-8")
    with pytest.raises(ValueError, match="require_lights"):
        load_config(ini)


def test_trigger_walk_accepts_strings():
    assert LoaderConfig(trigger_walk="siblings").trigger_walk is TriggerWalk.SIBLINGS


def test_replace_keeps_asset_dirs_relative(tmp_path):
    config = dataclasses.replace(LoaderConfig(), data_dir=tmp_path)
    assert config.get_texture_dir() == tmp_path / "textures"


def test_ini_without_section_header_is_invalid(tmp_path):
    ini = tmp_path / "maploader.ini"
    ini.write_text("data_dir = data\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid config file"):
        load_config(ini)
