"""
Badges Module - Project tag styling
Maps a project's category tag to the CSS classes used by cards and headers
"""

TAG_TYPES = {
    'research': {
        'css_class': 'tag-research',
    },
    'web-app': {
        'css_class': 'tag-web-app',
    },
    'tool': {
        'css_class': 'tag-tool',
    },
}


def normalize_tag(tag):
    """
    Normalize a display tag to its lookup key

    Args:
        tag (str): Display tag such as 'Web App'

    Returns:
        str: Lookup key such as 'web-app'
    """
    return '-'.join((tag or '').lower().split())


def get_tag_info(tag):
    """
    Get tag information

    Args:
        tag (str): Project tag as authored

    Returns:
        dict: Tag information, or None for tags without a dedicated style
    """
    return TAG_TYPES.get(normalize_tag(tag))


def get_tag_class(tag):
    """
    CSS classes for a project tag, used as a Jinja filter

    Example:
        >>> get_tag_class('Research')
        'tag tag-research'
    """
    info = get_tag_info(tag)
    if not info:
        return 'tag'
    return f"tag {info['css_class']}"


__all__ = [
    'TAG_TYPES',
    'normalize_tag',
    'get_tag_info',
    'get_tag_class'
]
