"""
Per-request session context.

Built once from the bearer token at the start of every authenticated request
and passed explicitly into services; nothing about the caller is kept at
module level between requests.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional

ADMIN_ROLE = "admin"
USER_ROLE = "user"
APP_ROLES = (ADMIN_ROLE, USER_ROLE)


@dataclass(frozen=True)
class SessionContext:
    user_id: str
    email: Optional[str] = None
    access_token: Optional[str] = None
    roles: FrozenSet[str] = frozenset()
    user_metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_admin(self) -> bool:
        return ADMIN_ROLE in self.roles

    def has_role(self, role: str) -> bool:
        return role in self.roles
