from blog.models.post import Post
from blog.models.profile import UserProfile

__all__ = ['Post', 'UserProfile']
