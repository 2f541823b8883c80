from .image import Image
from .article import Article, ArticleCategory
from .product import Product, ProductCategory
from .service import MainService, ImportService, ContractingService
from .project import Project, ProjectType
from .hero_section import HeroSection
from .hero_slide import HeroSlide
from .account import Account
from .role import Role, Permission, RolePermission, AccountRole
from .audit_log import AuditLog

__all__ = [
    "Image",
    "Article",
    "ArticleCategory",
    "Product",
    "ProductCategory",
    "MainService",
    "ImportService",
    "ContractingService",
    "Project",
    "ProjectType",
    "HeroSection",
    "HeroSlide",
    "Account",
    "Role",
    "Permission",
    "RolePermission",
    "AccountRole",
    "AuditLog",
]
