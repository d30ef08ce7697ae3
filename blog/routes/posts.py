from flask import Blueprint, current_app, g, jsonify, request
from blog.auth import require_editor
from blog.services.post_service import PostService

posts_bp = Blueprint('posts', __name__)
post_service = PostService()


@posts_bp.route('')
def list_posts():
    """List posts newest first, with truncated HTML previews."""
    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', current_app.config['POSTS_PER_PAGE'], type=int)
    max_length = current_app.config['SUMMARY_MAX_LENGTH']

    pagination = post_service.list_posts(page=page, per_page=per_page)
    return jsonify({
        'posts': [p.to_summary_dict(max_length) for p in pagination.items],
        'total': pagination.total,
        'page': page,
        'pages': pagination.pages,
    })


@posts_bp.route('/<int:post_id>')
def get_post(post_id):
    """Full post, content untruncated."""
    post = post_service.get_post(post_id)
    if not post:
        return jsonify({'error': 'Post not found'}), 404
    return jsonify(post.to_dict())


@posts_bp.route('', methods=['POST'])
@require_editor
def create_post():
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'JSON body required'}), 400

    try:
        post = post_service.create_post(data.get('title'), data.get('content'), g.identity)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(post.to_dict()), 201


@posts_bp.route('/<int:post_id>', methods=['PUT'])
@require_editor
def update_post(post_id):
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'JSON body required'}), 400

    try:
        post = post_service.update_post(post_id, data.get('title'), data.get('content'))
    except LookupError as e:
        return jsonify({'error': str(e)}), 404
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(post.to_dict())


@posts_bp.route('/<int:post_id>', methods=['DELETE'])
@require_editor
def delete_post(post_id):
    try:
        post_service.delete_post(post_id)
    except LookupError as e:
        return jsonify({'error': str(e)}), 404
    return jsonify({'status': 'deleted', 'id': post_id})
