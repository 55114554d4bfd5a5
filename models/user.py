from dataclasses import dataclass, asdict
from typing import Optional

from flask_login import UserMixin

ROLE_USER = "USER"
ROLE_OWNER = "OWNER"
ROLES = (ROLE_USER, ROLE_OWNER)


@dataclass
class User(UserMixin):
    id: str
    username: str
    email: str
    full_name: str
    role: str
    phone_number: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(
            id=str(data.get("id") or ""),
            username=data.get("username") or "",
            email=data.get("email") or "",
            full_name=data.get("fullName") or data.get("full_name") or "",
            role=data.get("role") or ROLE_USER,
            phone_number=data.get("phoneNumber") or data.get("phone_number"),
        )

    @classmethod
    def minimal(cls, role: str) -> "User":
        # Token and role cookie survived but the profile did not.
        return cls(id="", username="", email="", full_name="User", role=role)

    def to_dict(self) -> dict:
        return asdict(self)

    @property
    def is_owner(self) -> bool:
        return self.role == ROLE_OWNER

    @property
    def dashboard_endpoint(self) -> str:
        return "owner.dashboard" if self.is_owner else "user.dashboard"

    def get_id(self):
        # Flask-Login needs a truthy id even for the minimal user.
        return self.id or self.role
