"""
Portfolio Site - Main Application Entry Point
Built with the Application Factory Pattern for a modular architecture

This module initializes the Flask application with its configuration, the
project catalog and request hooks. All route handling is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template, request, current_app
from config import get_config
from extensions import catalog
from utils.navigation import Location, nav_links

# Import all blueprints
from blueprints.pages import pages_bp
from blueprints.portfolio import portfolio_bp


def create_app(config_name=None, projects=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        projects (iterable): Project records to serve instead of the
            authored catalog (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions with app
    initialize_extensions(app, projects=projects)

    # Register Jinja filters
    from utils.badges import get_tag_class
    app.jinja_env.filters['tag_class'] = get_tag_class
    app.logger.info('✓ Registered Jinja filter: tag_class')

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {
            'status': 'ok',
            'message': 'Portfolio site is running',
            'projects': len(catalog.list_projects()),
        }, 200

    return app


def initialize_extensions(app, projects=None):
    """Initialize application-wide providers with the app instance"""
    catalog.init_app(app, projects=projects)


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(portfolio_bp)
    app.logger.info(f"✓ Registered blueprints: {', '.join(app.blueprints)}")


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        # Missing static assets keep a real 404 for the browser
        if request.path.startswith(f'{app.static_url_path}/'):
            return e
        # Unmatched routes render the fallback view as a normal page
        current_app.logger.info(f"No route for {request.path}, rendering fallback")
        return render_template('pages/not_found.html'), 200

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Site-wide template context: nav state, assets, site settings"""
        from utils.ui_helpers import inject_blueprint_assets, get_page_specific_class

        # The URL fragment never reaches the server; the client script
        # refreshes hash-dependent nav state after load.
        location = Location(pathname=request.path)

        blueprint_assets = inject_blueprint_assets()
        page_class = get_page_specific_class(
            blueprint_assets.get('current_blueprint'),
            request.endpoint.split('.')[-1] if request.endpoint else None
        )

        return {
            'nav_links': nav_links(location),
            'site_name': app.config['SITE_NAME'],
            'site_title': app.config['SITE_TITLE'],
            'site_description': app.config['SITE_DESCRIPTION'],
            'social_links': app.config['SOCIAL_LINKS'],
            'current_year': datetime.now().year,
            'blueprint_styles': blueprint_assets.get('blueprint_styles', []),
            'blueprint_scripts': blueprint_assets.get('blueprint_scripts', []),
            'current_blueprint': blueprint_assets.get('current_blueprint'),
            'page_class': page_class
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self'; "
            "style-src 'self'; "
            "img-src 'self' data:; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


# Create app instance for WSGI servers
app = create_app()

if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=5000,
        debug=(env == 'development')
    )
