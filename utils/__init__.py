"""
Utils Package - Centralized utility modules initialization
"""

from .data import PROJECTS, PHOTOS, ProjectCatalog
from .badges import get_tag_class, get_tag_info
from .navigation import (
    NAV_ITEMS,
    Location,
    LocationSource,
    LocationSync,
    FrameScheduler,
    PageDocument,
    is_path_active,
    nav_links
)
from .ui_helpers import (
    get_blueprint_styles,
    get_blueprint_scripts,
    inject_blueprint_assets,
    get_page_specific_class
)

__all__ = [
    # Data
    'PROJECTS',
    'PHOTOS',
    'ProjectCatalog',

    # Badges
    'get_tag_class',
    'get_tag_info',

    # Navigation
    'NAV_ITEMS',
    'Location',
    'LocationSource',
    'LocationSync',
    'FrameScheduler',
    'PageDocument',
    'is_path_active',
    'nav_links',

    # UI Helpers
    'get_blueprint_styles',
    'get_blueprint_scripts',
    'inject_blueprint_assets',
    'get_page_specific_class'
]
