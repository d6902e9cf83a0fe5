"""
Element iteration utilities for map documents.

Every repeated-element scan in the loader goes through this module:
- iter_elements: lazy sequence of same-tagged children
- iter_siblings_from: legacy walk over every sibling after the first match
- first_child / has_child: presence checks done before iterating
"""

from typing import Iterator, Optional
from xml.etree.ElementTree import Element


def first_child(parent: Element, tag: str) -> Optional[Element]:
    """
    Return the first child element with the given tag.

    Args:
        parent: Element to search
        tag: Child tag name

    Returns:
        The element, or None if the parent has no such child
    """
    return parent.find(tag)


def has_child(parent: Element, tag: str) -> bool:
    """Check if the parent has at least one child with the given tag."""
    return parent.find(tag) is not None


def iter_elements(parent: Element, tag: str) -> Iterator[Element]:
    """
    Iterate the direct children of parent carrying the given tag, in document order.

    The sequence is lazy and restartable: each call walks the children again.
    An empty sequence means the parent has no such child.

    Usage:
        for wall in iter_elements(group, "wall"):
            build_wall(wall)
    """
    for child in parent:
        if child.tag == tag:
            yield child


def iter_siblings_from(parent: Element, tag: str) -> Iterator[Element]:
    """
    Iterate from the first child with the given tag through every following sibling.

    Siblings after the first match are yielded whatever their tag. This is the
    untagged walk older maps were loaded with.

    Args:
        parent: Element whose children are walked
        tag: Tag of the element the walk starts at

    Returns:
        Iterator of elements, empty if no child carries the tag
    """
    started = False
    for child in parent:
        if not started and child.tag != tag:
            continue
        started = True
        yield child
