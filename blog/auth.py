"""
Request identity and permission guards.

Sign-in happens elsewhere; the identity provider hands clients a signed
token (see issue_token) which is sent back as ``Authorization: Bearer``.
"""
import hmac
import logging
from functools import wraps
from flask import current_app, g, jsonify, request
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from blog.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

TOKEN_SALT = 'blog-identity'


def _serializer():
    return URLSafeTimedSerializer(current_app.config['SECRET_KEY'], salt=TOKEN_SALT)


def _bearer_token():
    auth_header = request.headers.get('Authorization', '')
    if auth_header.lower().startswith('bearer '):
        return auth_header.split(' ', 1)[1].strip()
    return ''


def issue_token(uid, email=None, display_name=None):
    """Sign an identity payload for the given user."""
    return _serializer().dumps({
        'uid': uid,
        'email': email or '',
        'display_name': display_name or '',
    })


def resolve_identity():
    """Identity dict for the current request, or None when anonymous."""
    token = _bearer_token()
    if not token:
        return None

    max_age = current_app.config.get('IDENTITY_TOKEN_MAX_AGE')
    try:
        payload = _serializer().loads(token, max_age=max_age)
    except SignatureExpired:
        logger.debug("Identity token expired")
        return None
    except BadSignature:
        logger.debug("Identity token rejected")
        return None

    if not isinstance(payload, dict) or not payload.get('uid'):
        return None
    return payload


def require_identity(func):
    """Reject anonymous requests; the identity is stored on ``g.identity``."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        identity = resolve_identity()
        if identity is None:
            return jsonify({'error': 'Authentication required'}), 401
        g.identity = identity
        return func(*args, **kwargs)

    return wrapper


def require_editor(func):
    """Only signed-in users with an editor profile may pass."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        identity = resolve_identity()
        if identity is None:
            return jsonify({'error': 'Authentication required'}), 401
        if not ProfileService().is_editor(identity['uid']):
            return jsonify({'error': 'Only editors can manage posts'}), 403
        g.identity = identity
        return func(*args, **kwargs)

    return wrapper


def require_admin_key(func):
    """Require ADMIN_API_KEY for admin endpoints."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        configured_key = current_app.config.get('ADMIN_API_KEY')
        if not configured_key:
            return jsonify({'error': 'Admin API is disabled: ADMIN_API_KEY is not configured'}), 503

        presented_key = _bearer_token() or (request.headers.get('X-Admin-Key') or '').strip()
        if not presented_key or not hmac.compare_digest(presented_key, configured_key):
            return jsonify({'error': 'Unauthorized'}), 401

        return func(*args, **kwargs)

    return wrapper
