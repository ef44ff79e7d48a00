"""
Portfolio Blueprint - Project detail views
Handles: Project detail pages and the project-not-found view
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes
