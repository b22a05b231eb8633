from .post import Post
from .post_translation import PostTranslation

__all__ = [
    "Post",
    "PostTranslation",
]
