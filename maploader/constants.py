"""
Constants used across the loader modules.

Consolidates element names, fixed asset identifiers and magic numbers.
"""

# Element tags of the map format
SPAWN_TAG = "spawn"
END_TAG = "end"
MODEL_TAG = "model"
LIGHT_TAG = "light"
TEXTURE_GROUP_TAG = "texture"
WALL_TAG = "wall"
TRIGGER_TAG = "trigger"
POSITION_TAG = "position"
ROTATION_TAG = "rotation"
SCALE_TAG = "scale"

# Fixed assets for the exit door
DOOR_TEXTURE = "Door.png"
DOOR_MESH = "Door.obj"

# Warning texture painted on trigger volumes
TRIGGER_TEXTURE = "redBox.png"

# UV repetition applied to every wall texture
WALL_TILING = (0.5, 0.5)

# Authoring placeholder for "no value", treated the same as a missing attribute
NONE_SENTINEL = "none"

# Default subdirectories of the data root
TEXTURE_SUBDIR = "textures"
MESH_SUBDIR = "meshes"

# Placeholder texture colour (RGB, 0-255) for absent identifiers
PLACEHOLDER_COLOR = (255, 0, 255)
