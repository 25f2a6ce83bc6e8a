from warm_admin.models.base import Base
from warm_admin.models.admin import Admin, AdminRole

__all__ = ["Base", "Admin", "AdminRole"]
