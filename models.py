from extensions import db, login_manager
from datetime import datetime, timezone
from flask_login import UserMixin


POST_STATUS_DRAFT = 'draft'
POST_STATUS_PUBLISHED = 'published'
POST_STATUSES = (POST_STATUS_DRAFT, POST_STATUS_PUBLISHED)


def utcnow():
    return datetime.now(timezone.utc)


def as_utc(value):
    if value is not None and value.tzinfo is None:
        # SQLite drops tzinfo on the way back; stored values are UTC
        value = value.replace(tzinfo=timezone.utc)
    return value


def isoformat(value):
    """Serialize a timestamp for JSON responses (None stays None)"""
    value = as_utc(value)
    return value.isoformat() if value is not None else None


class BlogPost(db.Model):
    __tablename__ = 'blog_posts'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    category = db.Column(db.String(100), nullable=False)
    featured_image = db.Column(db.String(500))
    content = db.Column(db.Text, nullable=False)
    seo_description = db.Column(db.Text)
    status = db.Column(db.String(20), nullable=False, default=POST_STATUS_DRAFT)
    published_at = db.Column(db.DateTime(timezone=True))  # set once, on first publish
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        db.Index('idx_blog_posts_status_created', 'status', 'created_at'),
        db.Index('idx_blog_posts_category', 'category'),
    )

    @property
    def is_published(self):
        return self.status == POST_STATUS_PUBLISHED

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'slug': self.slug,
            'category': self.category,
            'featuredImage': self.featured_image,
            'content': self.content,
            'seoDescription': self.seo_description,
            'status': self.status,
            'publishedAt': isoformat(self.published_at),
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def __repr__(self):
        return f'<BlogPost {self.id} {self.slug!r}>'


class CVDownload(db.Model):
    """Append-only log of CV downloads"""
    __tablename__ = 'cv_downloads'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    ip_address = db.Column(db.Text, nullable=False, default='unknown')
    user_agent = db.Column(db.Text, nullable=False)
    referrer = db.Column(db.Text)
    downloaded_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    # Index for faster queries
    __table_args__ = (
        db.Index('idx_cv_downloads_ip', 'ip_address'),
        db.Index('idx_cv_downloads_date', 'downloaded_at'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'ipAddress': self.ip_address,
            'userAgent': self.user_agent,
            'referrer': self.referrer,
            'downloadedAt': isoformat(self.downloaded_at),
        }

    def __repr__(self):
        return f'<CVDownload {self.id} {self.ip_address}>'


class User(UserMixin, db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    name = db.Column(db.String(255), nullable=False, default='Admin')
    password_hash = db.Column(db.String(255), nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email,
            'name': self.name,
        }


@login_manager.user_loader
def load_user(user_id):
    try:
        return db.session.get(User, int(user_id))
    except (TypeError, ValueError):
        return None
