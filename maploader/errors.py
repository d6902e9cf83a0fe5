"""
Exceptions raised while loading a map.

Every failure aborts the whole load. Callers only need to catch MapLoadError.
"""


class MapLoadError(RuntimeError):
    """Base class for all map loading failures."""


class MapDocumentError(MapLoadError):
    """The map file is missing or is not well-formed XML."""


class MissingElementError(MapLoadError):
    """A required element or attribute is absent."""


class MalformedElementError(MapLoadError):
    """An element is present but lacks required children or holds bad values."""


class ResourceError(MapLoadError):
    """A texture or mesh identifier could not be resolved."""
