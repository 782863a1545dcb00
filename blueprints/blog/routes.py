"""
Blog Routes - Public blog reader
"""

from flask import render_template, redirect, url_for, current_app
from models import POST_STATUS_PUBLISHED
from utils.errors import ApiError
from blueprints.blog_posts.queries import filter_posts, get_post_by_slug
from . import blog_bp


@blog_bp.route('/')
def index():
    """Published posts, newest first"""
    posts = filter_posts(status=POST_STATUS_PUBLISHED).all()
    return render_template('blog/index.html', posts=posts)


@blog_bp.route('/<path:slug>')
def post_detail(slug):
    """Single post page; drafts and unknown slugs go back to the list"""
    try:
        post = get_post_by_slug(slug)
    except ApiError as e:
        current_app.logger.info(f"Blog post page for {slug!r} unavailable: {e.message}")
        return redirect(url_for('blog.index'))

    if not post.is_published:
        return redirect(url_for('blog.index'))
    return render_template('blog/post.html', post=post)
