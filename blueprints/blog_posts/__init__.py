"""
Blog Posts Blueprint - JSON resource API for blog posts
Handles: Listing, lookup by id or slug, create, partial update, delete
"""

from flask import Blueprint

blog_posts_bp = Blueprint('blog_posts', __name__, url_prefix='/api')

from . import routes
