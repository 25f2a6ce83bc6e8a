# warm_admin/schemas/admin.py
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy.engine import Engine

from warm_admin.core.security import BCRYPT_MAX_PASSWORD_BYTES


class ProvisionConfig(BaseModel):
    """Everything the provisioner needs; defaults come from core.config."""
    model_config = ConfigDict(arbitrary_types_allowed=True, hide_input_in_errors=True)

    database: Union[str, Engine] = Field(..., description="SQLAlchemy URL or an existing Engine")
    target_email: str = Field(..., min_length=1)
    target_username: str = Field("admin", min_length=1)
    initial_password: str = Field(..., min_length=1, repr=False)
    first_name: Optional[str] = "Admin"
    last_name: Optional[str] = "User"
    force_update: bool = False

    @field_validator("initial_password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes (UTF-8)")
        return value


class ProvisionAction(str, Enum):
    CREATED = "created"
    EXISTS = "exists"
    UPDATED = "updated"


class ProvisionResult(BaseModel):
    """
    Outcome of one provisioning run.

    `password` is only set when a hash was written (created / updated) so the
    operator can be shown the plaintext once; it is never logged.
    """
    action: ProvisionAction
    email: str
    username: str
    password: Optional[str] = Field(None, repr=False)
    table_created: bool = False
