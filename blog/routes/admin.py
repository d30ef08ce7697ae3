from flask import Blueprint, jsonify, request
from blog.auth import require_admin_key
from blog.services.profile_service import ProfileService

admin_bp = Blueprint('admin', __name__)
profile_service = ProfileService()


@admin_bp.route('/profiles')
@require_admin_key
def list_profiles():
    """List all user profiles."""
    return jsonify([p.to_dict() for p in profile_service.list_profiles()])


@admin_bp.route('/profiles/<uid>/role', methods=['PUT'])
@require_admin_key
def set_role(uid):
    """Grant or revoke editor rights."""
    data = request.get_json(silent=True)
    if not data or 'profile' not in data:
        return jsonify({'error': 'JSON body with "profile" field required'}), 400

    try:
        profile = profile_service.set_role(uid, data['profile'])
    except LookupError as e:
        return jsonify({'error': str(e)}), 404
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(profile.to_dict())
