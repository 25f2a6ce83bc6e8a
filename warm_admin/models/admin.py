# warm_admin/models/admin.py
"""
Admin account model for the admin panel.
"""
import enum
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Index, Enum as SQLEnum

from warm_admin.models.base import Base, TimestampMixin


class AdminRole(str, enum.Enum):
    """Admin panel roles"""
    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    MANAGER = "manager"


class Admin(TimestampMixin, Base):
    """Admin panel account. `password` always holds a bcrypt hash."""
    __tablename__ = "admins"
    __table_args__ = (
        Index("idx_username", "username"),
        Index("idx_email", "email"),
        Index("idx_role", "role"),
        {"mysql_engine": "InnoDB", "mysql_charset": "utf8mb4", "mysql_collate": "utf8mb4_unicode_ci"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    role = Column(
        SQLEnum(
            AdminRole,
            name="admin_role",
            values_callable=lambda roles: [role.value for role in roles],
            create_constraint=True,
        ),
        default=AdminRole.ADMIN,
        nullable=False,
    )
    is_active = Column(Boolean, default=True, nullable=False)
    last_login = Column(DateTime, nullable=True)

    def to_profile(self) -> dict:
        """Profile snapshot as returned by the login endpoint (no password)."""
        role = self.role.value if isinstance(self.role, AdminRole) else self.role
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "role": role,
        }

    def __repr__(self):
        return f"<Admin {self.username} ({self.email})>"
