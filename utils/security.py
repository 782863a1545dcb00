"""
Security Module - Client IP derivation and password hashing
"""

from flask import request
from werkzeug.security import generate_password_hash, check_password_hash


UNKNOWN_IP = 'unknown'


def get_client_ip():
    """Get real client IP address from proxy headers.

    Only transport metadata is trusted: the first X-Forwarded-For entry,
    then X-Real-IP, then the literal 'unknown'.
    """
    forwarded = request.headers.get('X-Forwarded-For', '')
    first_hop = forwarded.split(',')[0].strip()
    if first_hop:
        return first_hop

    real_ip = request.headers.get('X-Real-IP', '').strip()
    return real_ip or UNKNOWN_IP


def hash_password(password):
    return generate_password_hash(password)


def verify_password(password, password_hash):
    """Verify password against hash"""
    if not password or not password_hash:
        return False
    return check_password_hash(password_hash, password)


__all__ = [
    'UNKNOWN_IP',
    'get_client_ip',
    'hash_password',
    'verify_password',
]
