"""
Blog Posts Routes - JSON resource API for blog posts
"""

from flask import request, jsonify, current_app
from sqlalchemy.exc import IntegrityError
from extensions import db
from models import BlogPost, utcnow
from utils.errors import DuplicateSlug
from utils.helpers import get_json_body, get_pagination, is_unique_violation, parse_id
from .queries import filter_posts, get_post_by_slug, get_post_or_404
from .schemas import BlogPostUpdate, parse_new_post
from . import blog_posts_bp


def _commit(slug):
    """Commit the session, surfacing slug collisions as DuplicateSlug"""
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        if is_unique_violation(e, 'slug'):
            current_app.logger.warning(f"Duplicate blog post slug rejected: {slug}")
            raise DuplicateSlug()
        raise


@blog_posts_bp.route('/blog-posts', methods=['GET'])
def get_blog_posts():
    """Single post by ?id=, otherwise a filtered, paginated list"""
    raw_id = request.args.get('id')
    if raw_id:
        post = get_post_or_404(parse_id(raw_id))
        return jsonify(post.to_dict()), 200

    limit, offset = get_pagination()
    query = filter_posts(
        search=request.args.get('search'),
        status=request.args.get('status'),
        category=request.args.get('category'),
    )
    posts = query.limit(limit).offset(offset).all()
    return jsonify([post.to_dict() for post in posts]), 200


@blog_posts_bp.route('/blog-posts', methods=['POST'])
def create_blog_post():
    values = parse_new_post(get_json_body())

    now = utcnow()
    post = BlogPost(**values)
    post.created_at = now
    post.updated_at = now
    if post.is_published:
        post.published_at = now

    db.session.add(post)
    _commit(post.slug)

    current_app.logger.info(f"Blog post created: id={post.id}, slug={post.slug}, status={post.status}")
    return jsonify(post.to_dict()), 201


@blog_posts_bp.route('/blog-posts', methods=['PUT'])
def update_blog_post():
    """Merge-patch update: only fields present in the body change"""
    post_id = parse_id(request.args.get('id'))
    update = BlogPostUpdate.from_body(get_json_body())

    post = get_post_or_404(post_id)
    update.apply(post, utcnow())
    _commit(post.slug)

    current_app.logger.info(f"Blog post {post.id} updated: {sorted(update.changes)}")
    return jsonify(post.to_dict()), 200


@blog_posts_bp.route('/blog-posts', methods=['DELETE'])
def delete_blog_post():
    post = get_post_or_404(parse_id(request.args.get('id')))
    deleted = post.to_dict()

    db.session.delete(post)
    db.session.commit()

    current_app.logger.info(f"Blog post deleted: id={deleted['id']}, slug={deleted['slug']}")
    return jsonify({
        'message': 'Blog post deleted successfully',
        'deleted': deleted
    }), 200


@blog_posts_bp.route('/blog-posts/slug/', defaults={'slug': ''}, methods=['GET'])
@blog_posts_bp.route('/blog-posts/slug/<path:slug>', methods=['GET'])
def get_blog_post_by_slug(slug):
    post = get_post_by_slug(slug)
    return jsonify(post.to_dict()), 200
