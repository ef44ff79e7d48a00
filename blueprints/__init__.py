"""
Blueprints Package - Modular application structure
Each blueprint handles a specific area of the site
"""

__all__ = ['pages', 'portfolio']
