from .base import Base
from .project import Project
from .post import Post
from .listing import Listing, LISTING_STATUSES
from .enquiry import Enquiry
from .site_setting import SiteSetting
from .profile import Profile, ROLES
from .instagram_cache import InstagramCache

__all__ = [
    "Base",
    "Project",
    "Post",
    "Listing",
    "LISTING_STATUSES",
    "Enquiry",
    "SiteSetting",
    "Profile",
    "ROLES",
    "InstagramCache",
]
