"""
SQLAlchemy ORM Models Package.

Models are organized into domain-specific modules:
- base: Base class, OwnedMixin, OrderMixin
- project: Project
- career: Company, Experience, Education, Certification
- skill: Skill
- blog: BlogPost
- social: Testimonial, Contact
- profile: Profile
"""

from .base import Base, OwnedMixin, OrderMixin
from .project import Project
from .career import Company, Experience, Education, Certification
from .skill import Skill
from .blog import BlogPost
from .social import Testimonial, Contact
from .profile import Profile

__all__ = [
    "Base",
    "OwnedMixin",
    "OrderMixin",
    "Project",
    "Company",
    "Experience",
    "Education",
    "Certification",
    "Skill",
    "BlogPost",
    "Testimonial",
    "Contact",
    "Profile",
]
