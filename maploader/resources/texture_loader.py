"""
Texture loading for map entities.

Decodes texture images from the data root with Open3D and caches them by
identifier. Every lookup returns a fresh Texture value so per-entity tiling
changes never reach other entities sharing the same image.
"""
from pathlib import Path
from typing import Dict, Optional, Tuple

import numpy as np
import open3d as o3d

from ..constants import PLACEHOLDER_COLOR
from ..errors import ResourceError
from ..scene.data_types import Texture
from ..utils import logDebug


class TextureLoader:
    """Loads and caches texture images from a texture directory."""

    def __init__(self, texture_dir: Path):
        """
        Args:
            texture_dir: Directory texture identifiers are relative to
        """
        self.texture_dir = Path(texture_dir)
        self._images: Dict[str, o3d.geometry.Image] = {}
        self._placeholder: Optional[o3d.geometry.Image] = None

    def get_texture(self, identifier: str) -> Texture:
        """
        Resolve a texture identifier.

        Args:
            identifier: File name relative to the texture directory, e.g. "Door.png"

        Returns:
            Texture with default 1x1 tiling

        Raises:
            ResourceError: If the file is missing or cannot be decoded
        """
        image = self._images.get(identifier)
        if image is None:
            image = self._load_image(identifier)
            self._images[identifier] = image

        width, height = self._image_size(image)
        return Texture(name=identifier, image=image, width=width, height=height)

    def get_placeholder(self) -> Texture:
        """Return the 1x1 magenta texture used for absent identifiers."""
        if self._placeholder is None:
            pixel = np.array([[PLACEHOLDER_COLOR]], dtype=np.uint8)
            self._placeholder = o3d.geometry.Image(pixel)
        return Texture(name=None, image=self._placeholder, width=1, height=1)

    def _load_image(self, identifier: str) -> o3d.geometry.Image:
        """Read and decode one image file."""
        filepath = self.texture_dir / identifier
        if not filepath.is_file():
            raise ResourceError(f"Texture not found: {filepath}")

        image = o3d.io.read_image(str(filepath))
        if image.is_empty():
            raise ResourceError(f"Texture could not be decoded: {filepath}")

        logDebug(f"Loaded texture {identifier} from {filepath}")
        return image

    @staticmethod
    def _image_size(image: o3d.geometry.Image) -> Tuple[int, int]:
        """Get (width, height) of a decoded image."""
        pixels = np.asarray(image)
        return int(pixels.shape[1]), int(pixels.shape[0])

    def __len__(self) -> int:
        """Return the number of cached images."""
        return len(self._images)
