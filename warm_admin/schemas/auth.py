# warm_admin/schemas/auth.py
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class LoginCredentials(BaseModel):
    """What the operator typed into the login form."""
    username: str = ""
    password: str = Field("", repr=False)

    def missing_fields(self) -> list:
        return [name for name in ("username", "password") if not getattr(self, name)]

    def to_wire(self) -> Dict[str, str]:
        """Request body for POST /api/auth/admin/login (username goes out as `email`)."""
        return {"email": self.username, "password": self.password}


class AdminProfile(BaseModel):
    """Admin snapshot stored next to the token; unknown keys are kept."""
    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    username: Optional[str] = None
    email: Optional[str] = None
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    role: Optional[str] = None


class LoginData(BaseModel):
    token: str = Field(..., min_length=1)
    admin: Dict[str, Any]


class LoginResponse(BaseModel):
    """Expected body: {"success": true, "data": {"token": ..., "admin": {...}}}"""
    success: bool
    data: Optional[LoginData] = None
    message: Optional[str] = None
