"""
Utility functions for describing loaded scenes.
"""


def _fmt(vector) -> str:
    return f"({vector[0]:.2f}, {vector[1]:.2f}, {vector[2]:.2f})"


def format_entity_info(entity) -> str:
    """Format a placed entity for display.

    Args:
        entity: Entity or Trigger with position, scale, texture and mesh

    Returns:
        Formatted string for display
    """
    info_text = f"""Position: {_fmt(entity.position)}
Scale:    {_fmt(entity.scale)}
"""

    rotation = getattr(entity, 'rotation', None)
    if rotation is not None:
        info_text += f"Rotation: {_fmt(rotation)}\n"

    trigger_type = getattr(entity, 'type', None)
    if trigger_type is not None:
        info_text += f"Type:     {trigger_type}\n"

    if entity.texture is not None:
        name = entity.texture.name or '(placeholder)'
        info_text += (f"Texture:  {name} {entity.texture.width}x{entity.texture.height}"
                      f" tiling {entity.texture.x_tiling:g}x{entity.texture.y_tiling:g}\n")

    if entity.mesh is not None:
        if entity.mesh.generated:
            info_text += f"Mesh:     box {_fmt(entity.mesh.size)}\n"
        else:
            info_text += f"Mesh:     {entity.mesh.name}\n"

    return info_text


def format_scene_summary(scene) -> str:
    """Format a one-screen summary of a loaded scene.

    Args:
        scene: Scene returned by MapLoader.get_scene

    Returns:
        Formatted string for display
    """
    lines = [
        "SCENE",
        f"Spawn:    {_fmt(scene.player.position)} rotation {_fmt(scene.player.rotation)}",
    ]

    if scene.end is not None:
        lines.append(f"End:      {_fmt(scene.end.position)} rotation {_fmt(scene.end.rotation)}")

    lines.append(f"Lights:   {len(scene.lights)}")
    for light in scene.lights:
        lines.append(f"  {_fmt(light.position)} color {_fmt(light.color)}")

    lines.append(f"Walls:    {len(scene.walls)}")

    lines.append(f"Triggers: {len(scene.triggers)}")
    for trigger in scene.triggers:
        lines.append(f"  {trigger.type} at {_fmt(trigger.position)}")

    lines.append(f"Models:   {len(scene.models)}")
    for model in scene.models:
        texture = model.texture.name if model.texture and model.texture.name else '(placeholder)'
        mesh = model.mesh.name if model.mesh and model.mesh.name else '(placeholder)'
        lines.append(f"  {mesh} [{texture}] at {_fmt(model.position)}")

    return "\n".join(lines) + "\n"
