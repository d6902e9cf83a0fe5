"""
Map Document Parsers

This package turns map files into element trees and reads typed values from them:

- base: Element iteration (iter_elements, iter_siblings_from, first_child)
- document: load_map_document for resolving and parsing a map file
- xml_helper: Vector, color and identifier extraction from element attributes

Usage:
    from maploader.parsers import load_map_document, iter_elements, read_vertex

    root = load_map_document("maps/n1.xml", "data")
    for light in iter_elements(root, "light"):
        print(read_vertex(light))
"""

# Element iteration
from .base import (
    first_child,
    has_child,
    iter_elements,
    iter_siblings_from,
)

# Document acquisition
from .document import (
    load_map_document,
    resolve_map_path,
)

# Attribute helpers
from .xml_helper import (
    read_float,
    read_triple,
    read_vertex,
    read_color,
    read_identifier,
    extract_position_and_rotation,
    extract_position_and_scale,
)

__all__ = [
    # Base
    'first_child',
    'has_child',
    'iter_elements',
    'iter_siblings_from',
    # Document
    'load_map_document',
    'resolve_map_path',
    # Helpers
    'read_float',
    'read_triple',
    'read_vertex',
    'read_color',
    'read_identifier',
    'extract_position_and_rotation',
    'extract_position_and_scale',
]
