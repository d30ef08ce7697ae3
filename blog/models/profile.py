from datetime import datetime, timezone
from blog.extensions import db

VALID_PROFILES = ('reader', 'editor')


def _utcnow():
    return datetime.now(timezone.utc)


class UserProfile(db.Model):
    __tablename__ = 'user_profiles'

    id = db.Column(db.Integer, primary_key=True)
    uid = db.Column(db.String(128), nullable=False, unique=True)
    email = db.Column(db.String(320), default='')
    display_name = db.Column(db.String(256), default='Anonymous')
    profile = db.Column(db.String(16), nullable=False, default='reader')
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    @property
    def is_editor(self):
        return self.profile == 'editor'

    def to_dict(self):
        return {
            'uid': self.uid,
            'email': self.email,
            'display_name': self.display_name,
            'profile': self.profile,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
