"""
UI Helper Functions for Blueprint-Specific Assets
=================================================

Resolves the stylesheets and scripts each blueprint needs, and the CSS
classes placed on <body> for the current page.

Usage:
1. Add the CSS/JS file under static/
2. Register it in the maps below
3. base.html picks the assets up through the context processor
"""

from flask import request
from typing import Dict, List, Optional


BASE_STYLES = ['css/portfolio.css']

BLUEPRINT_CSS_MAP = {
    'pages': [],
    'portfolio': [
        'css/project-detail.css',
    ],
}

BLUEPRINT_JS_MAP = {
    'pages': [
        'js/navigation.js',
    ],
    'portfolio': [
        'js/navigation.js',
    ],
}


def get_blueprint_styles(blueprint_name: Optional[str]) -> List[str]:
    """
    Stylesheets for a blueprint, base stylesheet first

    Args:
        blueprint_name: Blueprint name such as 'pages' or 'portfolio'

    Returns:
        list: Static-relative stylesheet paths

    Example:
        >>> get_blueprint_styles('portfolio')
        ['css/portfolio.css', 'css/project-detail.css']
    """
    return BASE_STYLES + BLUEPRINT_CSS_MAP.get(blueprint_name, [])


def get_blueprint_scripts(blueprint_name: Optional[str]) -> List[str]:
    """
    Scripts for a blueprint

    Pages rendered outside any blueprint (the not-found fallback) still get
    the navigation script so nav links behave the same everywhere.
    """
    if not blueprint_name:
        return ['js/navigation.js']
    return BLUEPRINT_JS_MAP.get(blueprint_name, [])


def inject_blueprint_assets() -> Dict[str, object]:
    """
    Assets for the blueprint handling the current request

    Returns:
        dict: blueprint_styles, blueprint_scripts and current_blueprint
    """
    blueprint_name = request.blueprint if request.blueprint else None

    return {
        'blueprint_styles': get_blueprint_styles(blueprint_name),
        'blueprint_scripts': get_blueprint_scripts(blueprint_name),
        'current_blueprint': blueprint_name,
    }


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS classes for <body> on the current page

    Example:
        >>> get_page_specific_class('portfolio', 'project_detail')
        'page-portfolio page-portfolio-project_detail'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)
