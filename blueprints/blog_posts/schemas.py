"""
Blog Post Schemas - Validation of create and merge-patch payloads
"""

from models import POST_STATUSES, POST_STATUS_DRAFT
from utils.errors import InvalidArgument, MissingField
from utils.helpers import clean_text


# Body key -> model attribute, in the order required fields are checked
REQUIRED_FIELDS = (
    ('title', 'title'),
    ('slug', 'slug'),
    ('category', 'category'),
    ('content', 'content'),
)
OPTIONAL_FIELDS = (
    ('featuredImage', 'featured_image'),
    ('seoDescription', 'seo_description'),
)


def _validate_status(value):
    if value not in POST_STATUSES:
        raise InvalidArgument(
            f"Status must be one of: {', '.join(POST_STATUSES)}", 'INVALID_STATUS')
    return value


def parse_new_post(body):
    """Validate a creation payload and return model attributes"""
    values = {}
    for key, attr in REQUIRED_FIELDS:
        value = clean_text(body.get(key))
        if value is None:
            raise MissingField(key)
        values[attr] = value

    for key, attr in OPTIONAL_FIELDS:
        values[attr] = clean_text(body.get(key))

    status = body.get('status')
    values['status'] = _validate_status(status) if status else POST_STATUS_DRAFT
    return values


class BlogPostUpdate:
    """Merge-patch for a blog post.

    Only keys present in the request body end up in ``changes``, so an
    omitted field is left alone while an optional field sent as null is
    cleared.
    """

    def __init__(self, changes):
        self.changes = changes

    @classmethod
    def from_body(cls, body):
        changes = {}
        for key, attr in REQUIRED_FIELDS:
            if key in body:
                value = clean_text(body[key])
                if value is None:
                    raise MissingField(key)
                changes[attr] = value

        for key, attr in OPTIONAL_FIELDS:
            if key in body:
                changes[attr] = clean_text(body[key])

        if 'status' in body:
            changes['status'] = _validate_status(body['status'])
        return cls(changes)

    def apply(self, post, now):
        """Apply the supplied fields to ``post`` and stamp timestamps"""
        for attr, value in self.changes.items():
            setattr(post, attr, value)

        # publishedAt is only ever set once
        if 'status' in self.changes and post.is_published and post.published_at is None:
            post.published_at = now
        post.updated_at = now
        return post
