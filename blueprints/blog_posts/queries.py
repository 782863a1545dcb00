"""
Blog Post Queries - Lookups shared by the API and the public reader
"""

from sqlalchemy import and_, or_
from extensions import db
from models import BlogPost
from utils.errors import InvalidArgument, NotFound


def _like_pattern(term):
    escaped = term.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    return f'%{escaped}%'


def filter_posts(search=None, status=None, category=None):
    """Build the listing query; filters are ANDed, search is title OR content"""
    conditions = []

    if search:
        pattern = _like_pattern(search)
        conditions.append(or_(
            BlogPost.title.ilike(pattern, escape='\\'),
            BlogPost.content.ilike(pattern, escape='\\'),
        ))
    if status:
        conditions.append(BlogPost.status == status)
    if category:
        conditions.append(BlogPost.category == category)

    query = BlogPost.query
    if conditions:
        query = query.filter(and_(*conditions))
    return query.order_by(BlogPost.created_at.desc(), BlogPost.id.desc())


def get_post_or_404(post_id):
    post = db.session.get(BlogPost, post_id)
    if post is None:
        raise NotFound('Blog post not found', 'NOT_FOUND')
    return post


def get_post_by_slug(slug):
    """Look a post up by slug regardless of its status"""
    slug = (slug or '').strip()
    if not slug:
        raise InvalidArgument('Valid slug is required', 'INVALID_SLUG')

    post = BlogPost.query.filter_by(slug=slug).first()
    if post is None:
        raise NotFound('Blog post not found', 'POST_NOT_FOUND')
    return post
