#!/usr/bin/env python3
"""
Load Map

Loads one map the same way the game does and prints what it contains.
Useful for checking a map after editing it.

Usage:
    maploader-load maps/n1.xml --config maploader.ini
    maploader-load maps/n1.xml --data-dir ../data --trigger-walk siblings
"""

import sys
import argparse
import dataclasses
from pathlib import Path

from .config import load_config, parse_trigger_walk
from .errors import MapLoadError
from .extraction import MapLoader
from .utils import log, logError, init_logging, print_summary, format_scene_summary, format_entity_info


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Load a map file and print the resulting scene',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
    maploader-load maps/n1.xml --config maploader.ini

    # Legacy trigger walk (every sibling after the first <trigger>):
    maploader-load maps/n1.xml --trigger-walk siblings

    # Fail on models without texture/mesh attributes:
    maploader-load maps/n1.xml --strict-assets
        """
    )

    parser.add_argument('map', help='Map path relative to the data directory')
    parser.add_argument('--config', default=None,
                        help='Path to maploader.ini (built-in defaults when omitted)')
    parser.add_argument('--data-dir', default=None,
                        help='Override the data directory from the config')
    parser.add_argument('--trigger-walk', default=None, choices=['tagged', 'siblings'],
                        help='Override how trigger elements are walked')
    parser.add_argument('--strict-assets', action='store_true',
                        help='Fail on missing texture/mesh identifiers')
    parser.add_argument('--no-require-lights', action='store_true',
                        help='Accept maps without any <light>')
    parser.add_argument('--log', default=None,
                        help='Also write output to this log file')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Print every wall, trigger and model in detail')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        init_logging(Path(args.log) if args.log else None)
        logError(f"{e}")
        print_summary()
        return 1

    overrides = {}
    if args.data_dir:
        overrides['data_dir'] = Path(args.data_dir)
    if args.trigger_walk:
        overrides['trigger_walk'] = parse_trigger_walk(args.trigger_walk)
    if args.strict_assets:
        overrides['strict_assets'] = True
    if args.no_require_lights:
        overrides['require_lights'] = False
    if args.log:
        overrides['log_file'] = Path(args.log)
    if overrides:
        config = dataclasses.replace(config, **overrides)

    init_logging(config.log_file)
    config.print_summary()
    log()

    exit_code = 0
    try:
        scene = MapLoader(config).get_scene(args.map)
    except MapLoadError:
        # Already reported by the loader
        exit_code = 1
    else:
        log()
        log(format_scene_summary(scene))

        if args.verbose:
            for title, entities in (("WALLS", scene.walls),
                                    ("TRIGGERS", scene.triggers),
                                    ("MODELS", scene.models)):
                for i, entity in enumerate(entities):
                    log(f"{title[:-1]} {i}")
                    log(format_entity_info(entity))

    print_summary()
    return exit_code


if __name__ == '__main__':
    sys.exit(main())
