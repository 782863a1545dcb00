"""
CV Downloads Blueprint - Append-only CV download log
Handles: Recording downloads, listing and lookup
"""

from flask import Blueprint

cv_downloads_bp = Blueprint('cv_downloads', __name__, url_prefix='/api')

from . import routes
