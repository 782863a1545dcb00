"""
Extensions Module - Flask extensions shared across the application
Created unbound here and attached to the app in create_app(), so models and
blueprints can import them without importing the app.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

db = SQLAlchemy()

# Admin sessions; the user loader lives in models.py
login_manager = LoginManager()
login_manager.login_view = 'auth.login'
login_manager.session_protection = 'basic'

__all__ = ['db', 'login_manager']
