"""
Admin Routes - Dashboard summary, analytics and CSV export
"""

import io
from flask import jsonify, send_file, current_app
from flask_login import current_user
from extensions import db
from models import BlogPost, CVDownload, POST_STATUS_DRAFT, POST_STATUS_PUBLISHED, utcnow
from utils.analytics import export_downloads_csv, get_download_stats
from utils.decorators import login_required
from . import admin_bp


RECENT_ITEMS = 5


@admin_bp.route('/')
@login_required
def index():
    """Dashboard overview for the logged-in admin"""
    status_counts = dict(
        db.session.query(BlogPost.status, db.func.count(BlogPost.id))
        .group_by(BlogPost.status)
        .all()
    )
    recent_posts = (BlogPost.query
                    .order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
                    .limit(RECENT_ITEMS).all())
    recent_downloads = (CVDownload.query
                        .order_by(CVDownload.downloaded_at.desc(), CVDownload.id.desc())
                        .limit(RECENT_ITEMS).all())

    return jsonify({
        'user': current_user.to_dict(),
        'stats': {
            'publishedPosts': status_counts.get(POST_STATUS_PUBLISHED, 0),
            'draftPosts': status_counts.get(POST_STATUS_DRAFT, 0),
            'totalDownloads': CVDownload.query.count(),
        },
        'recentPosts': [post.to_dict() for post in recent_posts],
        'recentDownloads': [download.to_dict() for download in recent_downloads],
        'categories': current_app.config.get('BLOG_CATEGORIES', []),
    }), 200


@admin_bp.route('/analytics')
@login_required
def analytics():
    return jsonify(get_download_stats()), 200


@admin_bp.route('/analytics/export.csv')
@login_required
def export_analytics():
    """Download every CV download record as CSV"""
    downloads = (CVDownload.query
                 .order_by(CVDownload.downloaded_at.desc(), CVDownload.id.desc())
                 .all())
    csv_content = export_downloads_csv(downloads)

    current_app.logger.info(f"CV downloads exported by {current_user.email}: {len(downloads)} rows")
    return send_file(io.BytesIO(csv_content.encode('utf-8')),
                     mimetype='text/csv',
                     as_attachment=True,
                     download_name=f"cv-downloads-{utcnow().strftime('%Y-%m-%d')}.csv")
