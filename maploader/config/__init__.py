"""
Config Package

Handles loader configuration (maploader.ini).
"""

from .loader_config import LoaderConfig, TriggerWalk, load_config, parse_trigger_walk
