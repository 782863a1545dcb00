"""
Helpers Module - Request parsing and small shared utilities
"""

import re

import bleach
from flask import request, current_app
from markupsafe import Markup, escape
from sqlalchemy.exc import IntegrityError
from .errors import InvalidArgument


# Largest value a signed 64-bit integer column or LIMIT/OFFSET accepts
MAX_SQL_INT = 2 ** 63 - 1

ID_PATTERN = re.compile(r'[0-9]+')


def clean_text(value):
    """Return a trimmed string, or None when the value is not a non-blank string"""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def get_json_body():
    """Request body as a dict; anything that is not a JSON object counts as empty"""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def parse_id(raw_id):
    """Parse a positive integer identifier from a query argument"""
    raw_id = (raw_id or '').strip()
    if not ID_PATTERN.fullmatch(raw_id) or not 0 < int(raw_id) <= MAX_SQL_INT:
        raise InvalidArgument('Valid ID is required', 'INVALID_ID')
    return int(raw_id)


def _int_arg(name, default):
    try:
        value = int(request.args.get(name, default))
    except (TypeError, ValueError):
        return default
    return min(value, MAX_SQL_INT)


def get_pagination():
    """Read limit/offset query arguments, capping limit at MAX_PAGE_SIZE"""
    default_limit = current_app.config.get('DEFAULT_PAGE_SIZE', 10)
    max_limit = current_app.config.get('MAX_PAGE_SIZE', 100)

    limit = min(max(_int_arg('limit', default_limit), 0), max_limit)
    offset = max(_int_arg('offset', 0), 0)
    return limit, offset


def is_unique_violation(error, column=None):
    """Check whether an IntegrityError is a unique-constraint failure.

    The exception type is the primary signal; the driver message is only
    inspected to tell unique violations from NOT NULL / foreign key ones,
    since drivers word them differently (SQLite: "UNIQUE constraint failed",
    PostgreSQL: "duplicate key value violates unique constraint").
    """
    if not isinstance(error, IntegrityError):
        return False
    message = str(error.orig).lower()
    if 'unique' not in message and 'duplicate' not in message:
        return False
    return column is None or column in message


ALLOWED_TAGS = [
    'p', 'br', 'hr', 'strong', 'b', 'em', 'i', 'u', 's', 'a', 'span',
    'ul', 'ol', 'li', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'blockquote', 'code', 'pre', 'img', 'figure', 'figcaption',
    'table', 'thead', 'tbody', 'tr', 'th', 'td', 'sup', 'sub',
]
ALLOWED_ATTRIBUTES = {
    'a': ['href', 'title', 'rel', 'target'],
    'img': ['src', 'alt', 'title', 'width', 'height', 'loading'],
    'th': ['colspan', 'rowspan', 'scope'],
    'td': ['colspan', 'rowspan'],
    'ol': ['start'],
    'code': ['class'],
    'pre': ['class'],
}
ALLOWED_PROTOCOLS = ['http', 'https', 'mailto']

# Tags whose content goes away with the tag
STRIP_CONTENT_TAGS = re.compile(
    r'<(script|style|noscript|template|iframe|svg|math)\b[^>]*>.*?</\1\s*>', re.I | re.S)


def sanitize_content(text):
    """Make stored post HTML safe to render in the public blog.

    - Plain text (no HTML) is escaped and split into paragraphs
    - HTML is cleaned by bleach against a tag/attribute/protocol allowlist;
      script-like blocks are removed together with their content
    """
    if not text:
        return Markup('')

    txt = text.replace('\r\n', '\n').replace('\r', '\n').strip()

    if '<' not in txt and '>' not in txt:
        paragraphs = [p.strip() for p in re.split(r'\n\s*\n', str(escape(txt))) if p.strip()]
        return Markup(''.join(f"<p>{p.replace(chr(10), '<br>')}</p>" for p in paragraphs))

    txt = STRIP_CONTENT_TAGS.sub('', txt)
    cleaned = bleach.clean(
        txt,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )
    return Markup(cleaned)


__all__ = [
    'clean_text',
    'get_json_body',
    'parse_id',
    'get_pagination',
    'is_unique_violation',
    'sanitize_content',
]
