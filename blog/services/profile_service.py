import logging
from datetime import datetime, timezone
from blog.extensions import db
from blog.models.profile import UserProfile, VALID_PROFILES

logger = logging.getLogger(__name__)


class ProfileService:
    def get_profile(self, uid):
        if not uid:
            return None
        return UserProfile.query.filter_by(uid=uid).first()

    def upsert_profile(self, uid, email=None, display_name=None, profile=None):
        """Create or merge a profile. New profiles default to reader."""
        if not uid:
            raise ValueError("uid is required")
        if profile is not None and profile not in VALID_PROFILES:
            raise ValueError(f"Invalid profile: {profile}")

        record = self.get_profile(uid)
        if record is None:
            record = UserProfile(
                uid=uid,
                email=email or '',
                display_name=display_name or 'Anonymous',
                profile=profile or 'reader',
            )
            db.session.add(record)
            logger.info(f"Created {record.profile} profile for {uid}")
        else:
            if email:
                record.email = email
            if display_name:
                record.display_name = display_name
            if profile:
                record.profile = profile
            record.updated_at = datetime.now(timezone.utc)

        db.session.commit()
        return record

    def set_role(self, uid, profile):
        """Change a user's role (reader/editor)."""
        if profile not in VALID_PROFILES:
            raise ValueError(f"Invalid profile: {profile}")

        record = self.get_profile(uid)
        if record is None:
            raise LookupError(f"Profile {uid} not found")

        record.profile = profile
        db.session.commit()
        logger.info(f"Set profile of {uid} to {profile}")
        return record

    def is_editor(self, uid):
        record = self.get_profile(uid)
        return bool(record and record.is_editor)

    def list_profiles(self):
        return UserProfile.query.order_by(UserProfile.created_at.desc()).all()
