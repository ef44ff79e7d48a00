"""
Pages Blueprint - Public site pages
Handles: Home, About, Sitemap, Robots
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
