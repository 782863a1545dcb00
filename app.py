"""
Portfolio - Main Application Entry Point
Application Factory Pattern for the blog and CV analytics backend

This module initializes the Flask application with all necessary extensions,
configurations, and hooks. All actual route handling is delegated to blueprints.
"""

import os
from flask import Flask, jsonify
from sqlalchemy import text
from werkzeug.exceptions import HTTPException
from config import get_config
from extensions import db, login_manager
from utils.decorators import admin_session_gate
from utils.errors import ApiError
from utils.helpers import sanitize_content
from cli import register_commands

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.admin import admin_bp
from blueprints.blog import blog_bp
from blueprints.blog_posts import blog_posts_bp
from blueprints.cv_downloads import cv_downloads_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str | type): Configuration environment name or config class (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = config_name if isinstance(config_name, type) else get_config(config_name)
    app.config.from_object(conf)
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # Initialize extensions with app
    initialize_extensions(app)

    # Register Jinja filters
    app.jinja_env.filters['sanitize_content'] = sanitize_content

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Register CLI commands
    register_commands(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio application is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    login_manager.init_app(app)

    # Create tables if they don't exist
    with app.app_context():
        try:
            import models  # noqa: F401  (registers the tables)
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    api_prefix = app.config.get('API_PREFIX', '/api')
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(blog_bp)
    app.register_blueprint(blog_posts_bp, url_prefix=api_prefix)
    app.register_blueprint(cv_downloads_bp, url_prefix=api_prefix)


def register_error_handlers(app):
    """Register JSON error handlers"""

    @app.errorhandler(ApiError)
    def api_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(Exception)
    def internal_server_error(e):
        db.session.rollback()
        app.logger.exception(f"Server Error: {str(e)}")
        return jsonify({'error': f'Internal server error: {str(e)}'}), 500


def register_hooks(app):
    """Register request/response hooks"""

    app.before_request(admin_session_gate)

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        if not app.debug:
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
