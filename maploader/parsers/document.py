"""
Map document acquisition.

Resolves a logical map path against the data root and parses the file.
"""

from pathlib import Path
from typing import Union
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from ..errors import MapDocumentError
from ..utils import logError, logDebug


def resolve_map_path(path: Union[str, Path], data_dir: Union[str, Path]) -> Path:
    """
    Join a logical map path to the data root.

    Logical paths are always relative to the data root, so a leading slash
    ("/maps/n1.xml") is dropped rather than treated as absolute.
    """
    relative = str(path).lstrip("/\\")
    return Path(data_dir) / relative


def load_map_document(path: Union[str, Path], data_dir: Union[str, Path]) -> Element:
    """
    Load and parse a map file.

    Args:
        path: Logical map path, e.g. "maps/n1.xml"
        data_dir: Data root the path is relative to

    Returns:
        The first top-level element of the document

    Raises:
        MapDocumentError: If the file is missing, unreadable or not well-formed
    """
    filepath = resolve_map_path(path, data_dir)

    if not filepath.is_file():
        logError(f"Unable to load file: {filepath}")
        raise MapDocumentError(f"Map file not found: {filepath}")

    try:
        tree = ElementTree.parse(filepath)
    except ElementTree.ParseError as e:
        logError(f"Unable to load file: {filepath} ({e})")
        raise MapDocumentError(f"Malformed map file {filepath}: {e}") from e
    except OSError as e:
        logError(f"Unable to load file: {filepath} ({e})")
        raise MapDocumentError(f"Cannot read map file {filepath}: {e}") from e

    root = tree.getroot()
    logDebug(f"Parsed {filepath}, root <{root.tag}> with {len(root)} children")
    return root
