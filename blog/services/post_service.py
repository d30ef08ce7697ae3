import logging
from datetime import datetime, timezone
from blog.extensions import db
from blog.models.post import Post
from blog.services.profile_service import ProfileService
from blog.utils.html_truncate import truncate_html, DEFAULT_MAX_LENGTH

logger = logging.getLogger(__name__)

MAX_PER_PAGE = 50


def _clean_fields(title, content):
    for value in (title, content):
        if value is not None and not isinstance(value, str):
            raise ValueError("Title and content must be strings")
    title = (title or '').strip()
    content = (content or '').strip()
    if not title or not content:
        raise ValueError("Both title and content are required")
    return title, content


class PostService:
    def __init__(self, profile_service=None):
        self.profiles = profile_service or ProfileService()

    def list_posts(self, page=1, per_page=10):
        """Newest first, paginated."""
        per_page = max(1, min(per_page, MAX_PER_PAGE))
        return Post.query.order_by(
            Post.created_at.desc(), Post.id.desc()
        ).paginate(page=page, per_page=per_page, error_out=False)

    def get_post(self, post_id):
        return db.session.get(Post, post_id)

    def create_post(self, title, content, identity):
        title, content = _clean_fields(title, content)

        profile = self.profiles.get_profile(identity['uid'])
        post = Post(
            title=title,
            content=content,
            author_id=identity['uid'],
            author_name=(profile.display_name if profile else None)
            or identity.get('display_name') or 'Anonymous',
            author_email=(profile.email if profile else None) or identity.get('email') or '',
        )
        db.session.add(post)
        db.session.commit()
        logger.info(f"Post {post.id} created by {post.author_id}")
        return post

    def update_post(self, post_id, title, content):
        post = self.get_post(post_id)
        if post is None:
            raise LookupError(f"Post {post_id} not found")

        post.title, post.content = _clean_fields(title, content)
        post.updated_at = datetime.now(timezone.utc)
        db.session.commit()
        logger.info(f"Post {post_id} updated")
        return post

    def delete_post(self, post_id):
        post = self.get_post(post_id)
        if post is None:
            raise LookupError(f"Post {post_id} not found")

        db.session.delete(post)
        db.session.commit()
        logger.info(f"Post {post_id} deleted")

    def summarize(self, post, max_length=DEFAULT_MAX_LENGTH):
        """Truncated preview of a post for listing cards."""
        return truncate_html(post.content, max_length)
