"""
Section extractors.

One function per map section. Each reads from the root element and appends to
the scene it is handed; nothing is kept between calls, so any extractor can be
run on its own against a parsed element.

Required sections (spawn, end, at least one light by default) raise
MissingElementError. Structural problems inside an element raise
MalformedElementError. Both abort the load.
"""

from dataclasses import replace
from typing import Iterator
from xml.etree.ElementTree import Element

from ..config import TriggerWalk
from ..constants import (
    DOOR_MESH,
    DOOR_TEXTURE,
    END_TAG,
    LIGHT_TAG,
    MODEL_TAG,
    SPAWN_TAG,
    TEXTURE_GROUP_TAG,
    TRIGGER_TAG,
    TRIGGER_TEXTURE,
    WALL_TAG,
    WALL_TILING,
)
from ..errors import MissingElementError
from ..parsers import (
    extract_position_and_rotation,
    extract_position_and_scale,
    first_child,
    has_child,
    iter_elements,
    iter_siblings_from,
    read_color,
    read_identifier,
    read_vertex,
)
from ..resources import ResourceResolver
from ..scene.data_types import Entity, Light, Player, Scene, Trigger
from ..utils import logDebug


def extract_spawn(root: Element, scene: Scene):
    """
    Extract the <spawn> element's position and rotation into scene.player.

    Raises:
        MissingElementError: If the map has no spawn
    """
    spawn_element = first_child(root, SPAWN_TAG)
    if spawn_element is None:
        raise MissingElementError("No spawn position defined.")

    position, rotation = extract_position_and_rotation(spawn_element)
    scene.player = Player(position=position, rotation=rotation)


def extract_door(root: Element, scene: Scene, resources: ResourceResolver):
    """
    Extract the <end> element into the exit door entity.

    The door always uses the fixed door texture and mesh.

    Raises:
        MissingElementError: If the map has no end
    """
    end_element = first_child(root, END_TAG)
    if end_element is None:
        raise MissingElementError("No end position defined.")

    position, rotation = extract_position_and_rotation(end_element)
    door = Entity(position=position, rotation=rotation)
    door.texture = resources.texture(DOOR_TEXTURE, "door")
    door.mesh = resources.mesh(DOOR_MESH, "door")
    scene.end = door


def extract_models(root: Element, scene: Scene, resources: ResourceResolver):
    """
    Extract every <model> element.

    Models name their own texture and mesh through attributes. A map without
    models is valid.
    """
    for index, model_element in enumerate(iter_elements(root, MODEL_TAG)):
        texture = read_identifier(model_element, "texture")
        mesh = read_identifier(model_element, "mesh")
        context = f"model {index}"

        position, rotation = extract_position_and_rotation(model_element)
        model = Entity(position=position, rotation=rotation)
        model.texture = resources.texture(texture, context)
        model.mesh = resources.mesh(mesh, context)
        scene.models.append(model)


def extract_lights(root: Element, scene: Scene, require: bool = True):
    """
    Extract every <light> element: x, y, z for position and r, g, b for color.

    Attributes a light leaves out are 0 for that light.

    Args:
        require: Fail when the map has no light at all

    Raises:
        MissingElementError: If require is set and the map has no light
    """
    if not has_child(root, LIGHT_TAG):
        if require:
            raise MissingElementError("No light defined.")
        return

    for light_element in iter_elements(root, LIGHT_TAG):
        light = Light(position=read_vertex(light_element), color=read_color(light_element))
        scene.lights.append(light)


def extract_walls(root: Element, scene: Scene, resources: ResourceResolver):
    """
    Extract walls from <texture> groups.

    Each group binds one texture source to the <wall> elements inside it.
    A group's source never carries over to the next group. Every wall gets
    the fixed wall tiling and a box mesh sized from its scale.

    Raises:
        MalformedElementError: If a wall lacks <position> or <scale>
    """
    walls = []
    for group_index, group_element in enumerate(iter_elements(root, TEXTURE_GROUP_TAG)):
        source = read_identifier(group_element, "source")
        surface_type = read_identifier(group_element, "type")
        logDebug(f"Texture group {group_index}: source={source} type={surface_type}")

        # Resolved on the first wall, so empty groups never touch the resolver
        group_texture = None
        for wall_index, wall_element in enumerate(iter_elements(group_element, WALL_TAG)):
            position, scale = extract_position_and_scale(wall_element)

            if group_texture is None:
                group_texture = resources.texture(source, f"texture group {group_index}")

            wall = Entity(position=position, scale=scale)
            x_tiling, y_tiling = WALL_TILING
            wall.texture = replace(group_texture, x_tiling=x_tiling, y_tiling=y_tiling)
            wall.mesh = resources.portal_box(wall)
            walls.append(wall)

            logDebug(f"  wall {wall_index} at {position} scale {scale}")

    scene.walls.extend(walls)


def _trigger_elements(root: Element, walk: TriggerWalk) -> Iterator[Element]:
    if walk is TriggerWalk.SIBLINGS:
        return iter_siblings_from(root, TRIGGER_TAG)
    return iter_elements(root, TRIGGER_TAG)


def extract_triggers(root: Element, scene: Scene, resources: ResourceResolver,
                     walk: TriggerWalk = TriggerWalk.TAGGED):
    """
    Extract trigger volumes.

    Args:
        walk: TAGGED reads only <trigger> elements. SIBLINGS reads the first
              <trigger> and every sibling after it, whatever its tag.

    Raises:
        MissingElementError: If a trigger has no type (or type "none")
        MalformedElementError: If a trigger lacks <position> or <scale>
    """
    # Scene is only touched once every trigger is valid
    triggers = []
    for trigger_element in _trigger_elements(root, walk):
        trigger_type = read_identifier(trigger_element, "type")
        if trigger_type is None:
            raise MissingElementError(
                f"Trigger must define a type attribute. (<{trigger_element.tag}> "
                f"#{len(triggers) + 1})"
            )

        position, scale = extract_position_and_scale(trigger_element)

        trigger = Trigger(type=trigger_type, position=position, scale=scale)
        trigger.texture = resources.texture(TRIGGER_TEXTURE, f"{trigger_type} trigger")
        trigger.mesh = resources.portal_box(trigger)
        triggers.append(trigger)

    scene.triggers.extend(triggers)
