#!/usr/bin/env python3
"""
Loader Configuration

Parser for the maploader.ini configuration file.
Defines the data root and the switches that change how maps are read.

INI Format:
    [paths]
    data_dir = data          ; relative paths resolve against the INI's folder
    textures = textures      ; relative to data_dir
    meshes = meshes          ; relative to data_dir

    [loader]
    trigger_walk = tagged    ; tagged | siblings
    strict_assets = false    ; fail on missing texture/mesh identifiers
    require_lights = true    ; fail on maps without a <light>
    log_file =               ; optional log file
"""

import configparser
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..constants import MESH_SUBDIR, TEXTURE_SUBDIR
from ..utils import log, logError


class TriggerWalk(Enum):
    """How the trigger extractor walks the root's children."""
    # Only <trigger> elements
    TAGGED = "tagged"
    # First <trigger> and every sibling element after it, whatever the tag
    SIBLINGS = "siblings"


_TRUE_VALUES = ('true', '1', 'yes', 'on')
_FALSE_VALUES = ('false', '0', 'no', 'off')


@dataclass
class LoaderConfig:
    """Configuration for map loading"""
    data_dir: Path = Path("data")
    texture_dir: Path = Path(TEXTURE_SUBDIR)  # Relative to data_dir
    mesh_dir: Path = Path(MESH_SUBDIR)  # Relative to data_dir
    trigger_walk: TriggerWalk = TriggerWalk.TAGGED
    strict_assets: bool = False
    require_lights: bool = True
    log_file: Optional[Path] = None
    config_path: Optional[Path] = None  # Where this config was read from, if anywhere

    def __post_init__(self):
        """Normalise paths and validate"""
        self.data_dir = Path(self.data_dir)
        self.texture_dir = Path(self.texture_dir)
        self.mesh_dir = Path(self.mesh_dir)

        if not isinstance(self.trigger_walk, TriggerWalk):
            self.trigger_walk = parse_trigger_walk(str(self.trigger_walk))

        if self.log_file is not None:
            self.log_file = Path(self.log_file)

    def get_data_dir(self) -> Path:
        """Get the data root map paths are relative to."""
        return self.data_dir

    def get_texture_dir(self) -> Path:
        """Get the directory texture identifiers are relative to."""
        return self.data_dir / self.texture_dir

    def get_mesh_dir(self) -> Path:
        """Get the directory mesh identifiers are relative to."""
        return self.data_dir / self.mesh_dir

    def print_summary(self):
        """Print configuration summary"""
        source = self.config_path if self.config_path else "defaults"
        log(f"Loader configuration ({source}):")
        log(f"  Data dir:       {self.data_dir}")
        log(f"  Textures:       {self.get_texture_dir()}")
        log(f"  Meshes:         {self.get_mesh_dir()}")
        log(f"  Trigger walk:   {self.trigger_walk.value}")
        log(f"  Strict assets:  {self.strict_assets}")
        log(f"  Require lights: {self.require_lights}")
        if self.log_file:
            log(f"  Log file:       {self.log_file}")


def parse_trigger_walk(value: str) -> TriggerWalk:
    """Parse a trigger_walk setting ('tagged' or 'siblings')"""
    try:
        return TriggerWalk(value.strip().lower())
    except ValueError:
        choices = ", ".join(walk.value for walk in TriggerWalk)
        raise ValueError(f"Invalid trigger_walk '{value}' (expected one of: {choices})") from None


def _parse_bool(value: str, key: str) -> bool:
    """Parse an INI boolean, rejecting anything unrecognised"""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for '{key}': {value}")


def load_config(config_path: Union[str, Path, None] = None) -> LoaderConfig:
    """
    Load loader configuration.

    Args:
        config_path: Path to maploader.ini, or None for built-in defaults

    Returns:
        Validated LoaderConfig

    Raises:
        FileNotFoundError: If config_path does not exist
        ValueError: If a setting is invalid
    """
    if config_path is None:
        return LoaderConfig()

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    parser = configparser.ConfigParser(inline_comment_prefixes=(';', '#'))
    try:
        parser.read(config_path, encoding='utf-8')
    except configparser.Error as e:
        raise ValueError(f"Invalid config file {config_path}: {e}") from e

    paths = parser['paths'] if parser.has_section('paths') else {}
    loader = parser['loader'] if parser.has_section('loader') else {}

    # Relative data roots are relative to the INI file's folder
    data_dir = Path(paths.get('data_dir', 'data').strip())
    if not data_dir.is_absolute():
        data_dir = config_path.parent / data_dir

    texture_dir = paths.get('textures', '').strip() or TEXTURE_SUBDIR
    mesh_dir = paths.get('meshes', '').strip() or MESH_SUBDIR

    log_file = loader.get('log_file', '').strip() or None
    if log_file is not None and not Path(log_file).is_absolute():
        log_file = config_path.parent / log_file

    return LoaderConfig(
        data_dir=data_dir,
        texture_dir=texture_dir,
        mesh_dir=mesh_dir,
        trigger_walk=parse_trigger_walk(loader.get('trigger_walk', 'tagged')),
        strict_assets=_parse_bool(loader.get('strict_assets', 'false'), 'strict_assets'),
        require_lights=_parse_bool(loader.get('require_lights', 'true'), 'require_lights'),
        log_file=log_file,
        config_path=config_path,
    )


def main():
    """Check a configuration file"""
    import sys

    config_path = sys.argv[1] if len(sys.argv) > 1 else "maploader.ini"

    try:
        config = load_config(config_path)
        config.print_summary()

        log("\n" + "=" * 60)
        log("Configuration valid!")
        log("=" * 60)

    except (OSError, ValueError) as e:
        logError(f"{e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
