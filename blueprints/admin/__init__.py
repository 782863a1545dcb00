"""
Admin Blueprint - Authenticated admin area
Handles: Dashboard summary, CV download analytics, CSV export
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')

from . import routes
