from flask import Blueprint, g, jsonify
from blog.auth import require_identity
from blog.services.profile_service import ProfileService

profiles_bp = Blueprint('profiles', __name__)
profile_service = ProfileService()


@profiles_bp.route('/me')
@require_identity
def get_my_profile():
    profile = profile_service.get_profile(g.identity['uid'])
    if not profile:
        return jsonify({'error': 'Profile not found'}), 404
    return jsonify(profile.to_dict())


@profiles_bp.route('/me', methods=['POST'])
@require_identity
def save_my_profile():
    """Create the caller's profile on first sign-in, or refresh its name/email."""
    profile = profile_service.upsert_profile(
        g.identity['uid'],
        email=g.identity.get('email'),
        display_name=g.identity.get('display_name'),
    )
    return jsonify(profile.to_dict())
