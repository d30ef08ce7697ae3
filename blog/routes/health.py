import logging
from flask import Blueprint, jsonify
from sqlalchemy import inspect, text
from blog.extensions import db
from blog.models.post import Post

logger = logging.getLogger(__name__)

health_bp = Blueprint('health', __name__)

REQUIRED_TABLES = ('posts', 'user_profiles')


@health_bp.route('/health')
def health():
    return jsonify({'status': 'ok'})


@health_bp.route('/ready')
def ready():
    """Ready once the database answers and the blog tables exist."""
    try:
        db.session.execute(text('SELECT 1'))
        tables = set(inspect(db.engine).get_table_names())
        db_ok = True
    except Exception as e:
        logger.warning(f"Readiness check failed: {e}")
        tables = set()
        db_ok = False

    missing = [t for t in REQUIRED_TABLES if t not in tables]
    is_ready = db_ok and not missing
    payload = {
        'status': 'ready' if is_ready else 'not_ready',
        'db': db_ok,
        'missing_tables': missing,
    }
    if is_ready:
        payload['posts'] = Post.query.count()
    return jsonify(payload), 200 if is_ready else 503
