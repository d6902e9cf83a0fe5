"""
Attribute extraction helpers shared by the section extractors.
"""

import math
from typing import Optional, Sequence
from xml.etree.ElementTree import Element

from ..constants import NONE_SENTINEL, POSITION_TAG, ROTATION_TAG, SCALE_TAG
from ..errors import MalformedElementError
from ..scene.data_types import Vector3, ZERO, UNIT


def read_float(element: Element, name: str, default: float) -> float:
    """
    Read a float attribute.

    Args:
        element: Element carrying the attribute
        name: Attribute name
        default: Value used when the attribute is absent

    Returns:
        The parsed value or default

    Raises:
        MalformedElementError: If the attribute is present but not a number
    """
    raw = element.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise MalformedElementError(
            f"<{element.tag}> attribute {name}={raw!r} is not a number"
        ) from None
    if not math.isfinite(value):
        raise MalformedElementError(
            f"<{element.tag}> attribute {name}={raw!r} is not a finite number"
        )
    return value


def read_triple(element: Element, names: Sequence[str], default: Vector3 = ZERO) -> Vector3:
    """
    Read three float attributes into a vector.

    Components whose attribute is absent keep the matching default component.
    """
    return tuple(read_float(element, name, value) for name, value in zip(names, default))


def read_vertex(element: Element, default: Vector3 = ZERO) -> Vector3:
    """Read the x, y, z attributes of an element into a vector."""
    return read_triple(element, ("x", "y", "z"), default)


def read_color(element: Element) -> Vector3:
    """Read the r, g, b attributes of an element into a color."""
    return read_triple(element, ("r", "g", "b"), ZERO)


def read_identifier(element: Element, name: str) -> Optional[str]:
    """
    Read a string attribute naming an asset or a kind.

    Returns:
        The stripped value, or None when missing, empty or "none"
    """
    raw = element.get(name)
    if raw is None:
        return None
    value = raw.strip()
    if not value or value == NONE_SENTINEL:
        return None
    return value


def extract_position_and_rotation(element: Element):
    """
    Read the optional <position> and <rotation> children of an element.

    Returns:
        Tuple of (position, rotation); an absent child yields the zero vector
    """
    position = ZERO
    rotation = ZERO

    position_element = element.find(POSITION_TAG)
    if position_element is not None:
        position = read_vertex(position_element)

    rotation_element = element.find(ROTATION_TAG)
    if rotation_element is not None:
        rotation = read_vertex(rotation_element)

    return position, rotation


def extract_position_and_scale(element: Element):
    """
    Read the required <position> and <scale> children of a box volume.

    Returns:
        Tuple of (position, scale)

    Raises:
        MalformedElementError: If either child is missing
    """
    position_element = element.find(POSITION_TAG)
    if position_element is None:
        raise MalformedElementError(f"<{element.tag}> has no <{POSITION_TAG}> element")

    scale_element = element.find(SCALE_TAG)
    if scale_element is None:
        raise MalformedElementError(f"<{element.tag}> has no <{SCALE_TAG}> element")

    return read_vertex(position_element), read_vertex(scale_element, UNIT)
