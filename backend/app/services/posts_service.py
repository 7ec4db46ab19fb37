from __future__ import annotations

from ..models import Post
from .publishing import PublishableService


class PostsService(PublishableService[Post]):
    model = Post
    label = "Editorial"
    required_fields = frozenset({"title", "slug", "tags"})
