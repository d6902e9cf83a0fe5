# Loader utilities
from .logging import log, logWarning, logError, logDebug, init_logging, close_logging, print_summary, get_counts
from .helpers import format_scene_summary, format_entity_info
