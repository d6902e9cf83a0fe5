"""Texture and mesh resolution for map entities"""
from .texture_loader import TextureLoader
from .mesh_loader import MeshLoader
from .resolver import ResourceResolver

__all__ = ['TextureLoader', 'MeshLoader', 'ResourceResolver']
