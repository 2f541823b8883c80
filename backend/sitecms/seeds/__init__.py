from .roles import seed_roles
from .permissions import seed_permissions
from .homepage import seed_homepage

__all__ = ["seed_roles", "seed_permissions", "seed_homepage"]
