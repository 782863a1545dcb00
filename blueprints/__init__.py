"""
Blueprints Package - Modular application structure
Each blueprint handles a specific domain of functionality
"""

__all__ = ['admin', 'auth', 'blog', 'blog_posts', 'cv_downloads']
