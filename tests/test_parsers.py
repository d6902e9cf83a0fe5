from xml.etree import ElementTree

import pytest

from maploader.errors import MalformedElementError
from maploader.parsers import (
    extract_position_and_rotation,
    extract_position_and_scale,
    iter_elements,
    iter_siblings_from,
    read_identifier,
    read_vertex,
    resolve_map_path,
)

ROOT = ElementTree.fromstring("""<map>
    <light id="a"/>
    <model id="b"/>
    <!-- comments are not elements -->
    <light id="c"/>
    <trigger id="d"/>
    <light id="e"/>
</map>""")


def _ids(elements):
    return [e.get("id") for e in elements]


def test_iter_elements_filters_by_tag():
    assert _ids(iter_elements(ROOT, "light")) == ["a", "c", "e"]


def test_iter_elements_is_restartable():
    lights = lambda: iter_elements(ROOT, "light")
    assert _ids(lights()) == _ids(lights())


def test_iter_elements_empty_when_absent():
    assert list(iter_elements(ROOT, "spawn")) == []


def test_iter_siblings_from_ignores_tags_after_start():
    assert _ids(iter_siblings_from(ROOT, "model")) == ["b", "c", "d", "e"]


def test_iter_siblings_from_empty_when_absent():
    assert list(iter_siblings_from(ROOT, "spawn")) == []


@pytest.mark.parametrize("xml,expected", [
    ('<model texture="a.png"/>', "a.png"),
    ('<model texture="  a.png "/>', "a.png"),
    ('<model texture="none"/>', None),
    ('<model texture=""/>', None),
    ('<model/>', None),
])
def test_read_identifier(xml, expected):
    assert read_identifier(ElementTree.fromstring(xml), "texture") == expected


def test_read_vertex_keeps_default_for_missing_components():
    element = ElementTree.fromstring('<scale y="3"/>')
    assert read_vertex(element, (1.0, 1.0, 1.0)) == (1.0, 3.0, 1.0)


def test_read_vertex_rejects_non_numbers():
    with pytest.raises(MalformedElementError):
        read_vertex(ElementTree.fromstring('<position x="1" y="up" z="0"/>'))


def test_position_and_rotation_optional():
    element = ElementTree.fromstring('<spawn><rotation y="90"/></spawn>')
    assert extract_position_and_rotation(element) == ((0.0, 0.0, 0.0), (0.0, 90.0, 0.0))


def test_position_and_scale_defaults_scale_components_to_one():
    element = ElementTree.fromstring('<wall><position x="1"/><scale x="5"/></wall>')
    assert extract_position_and_scale(element) == ((1.0, 0.0, 0.0), (5.0, 1.0, 1.0))


def test_resolve_map_path(tmp_path):
    assert resolve_map_path("/maps/n1.xml", tmp_path) == tmp_path / "maps" / "n1.xml"
    assert resolve_map_path("maps/n1.xml", tmp_path) == tmp_path / "maps" / "n1.xml"
