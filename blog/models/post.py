from datetime import datetime, timezone
from blog.extensions import db
from blog.utils.html_truncate import truncate_html, DEFAULT_MAX_LENGTH


def _utcnow():
    return datetime.now(timezone.utc)


class Post(db.Model):
    __tablename__ = 'posts'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(512), nullable=False)
    content = db.Column(db.Text, nullable=False)
    author_id = db.Column(db.String(128), nullable=False, index=True)
    author_name = db.Column(db.String(256))
    author_email = db.Column(db.String(320))
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), onupdate=_utcnow)

    __table_args__ = (
        db.Index('ix_posts_created_at', 'created_at'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'content': self.content,
            'author_id': self.author_id,
            'author_name': self.author_name,
            'author_email': self.author_email,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def to_summary_dict(self, max_length=DEFAULT_MAX_LENGTH):
        result = truncate_html(self.content, max_length)
        return {
            'id': self.id,
            'title': self.title,
            'summary': result.content,
            'is_truncated': result.is_truncated,
            'author_name': self.author_name,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
