"""
Row-level authorization policies.

Mirrors the RLS policies in supabase/migrations so the same decisions are made
before a request reaches the store. Every predicate receives the caller
(a SessionContext, or None when unauthenticated) and the target row. For
INSERT the row is the one being created; for UPDATE/DELETE it is the
existing row. A (table, operation) pair without an entry is denied.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Set

from fastapi import HTTPException, status
from supabase import Client

from app.core.session import ADMIN_ROLE, SessionContext

logger = logging.getLogger(__name__)

Row = Dict[str, Any]
Predicate = Callable[[Optional[SessionContext], Row], bool]


class Operation(str, Enum):
    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


class Table(str, Enum):
    PROFILES = "profiles"
    USER_ROLES = "user_roles"
    TRAVEL_POSTS = "travel_posts"
    EMERGENCY_REQUESTS = "emergency_requests"
    ERRAND_REQUESTS = "errand_requests"
    CARPOOL_RIDES = "carpool_rides"
    ACTIVITY_LOGS = "activity_logs"


def has_role(user_id: Optional[str], role: str, supabase: Client) -> bool:
    """Privilege primitive.

    `supabase` must be the service-role client: the lookup bypasses RLS so
    that checking admin membership never re-enters the user_roles policies.
    The identity being checked is always passed explicitly.
    """
    if not user_id:
        return False
    result = supabase.table(Table.USER_ROLES.value)\
        .select("id")\
        .eq("user_id", user_id)\
        .eq("role", role)\
        .limit(1)\
        .execute()
    return bool(result.data)


def get_user_roles(user_id: str, supabase: Client) -> Set[str]:
    """All roles held by `user_id` (service-role client, bypasses RLS)."""
    result = supabase.table(Table.USER_ROLES.value)\
        .select("role")\
        .eq("user_id", user_id)\
        .execute()
    return {r["role"] for r in (result.data or [])}


def _anyone(caller: Optional[SessionContext], row: Row) -> bool:
    return True


def _authenticated(caller: Optional[SessionContext], row: Row) -> bool:
    return caller is not None


def _owner(column: str) -> Predicate:
    def check(caller: Optional[SessionContext], row: Row) -> bool:
        return caller is not None and row.get(column) == caller.user_id
    return check


def _admin(caller: Optional[SessionContext], row: Row) -> bool:
    return caller is not None and caller.has_role(ADMIN_ROLE)


def _owner_or_admin(column: str) -> Predicate:
    is_owner = _owner(column)

    def check(caller: Optional[SessionContext], row: Row) -> bool:
        return is_owner(caller, row) or _admin(caller, row)
    return check


S, I, U, D = Operation.SELECT, Operation.INSERT, Operation.UPDATE, Operation.DELETE

POLICIES: Dict[Table, Dict[Operation, Predicate]] = {
    # Profiles are only created by the signup trigger and removed by cascade.
    Table.PROFILES: {
        S: _owner("user_id"),
        U: _owner("user_id"),
    },
    # No client-facing writes: privilege cannot be self-assigned.
    Table.USER_ROLES: {
        S: _owner("user_id"),
    },
    Table.TRAVEL_POSTS: {
        S: _authenticated,
        I: _owner("user_id"),
        U: _owner("user_id"),
        D: _owner("user_id"),
    },
    Table.EMERGENCY_REQUESTS: {
        S: _owner_or_admin("user_id"),
        I: _owner("user_id"),
        U: _admin,
        D: _admin,
    },
    Table.ERRAND_REQUESTS: {
        S: _anyone,
        I: _owner("user_id"),
        U: _owner("user_id"),
        D: _owner("user_id"),
    },
    Table.CARPOOL_RIDES: {
        S: _anyone,
        I: _owner("driver_id"),
        U: _owner("driver_id"),
        D: _owner("driver_id"),
    },
    Table.ACTIVITY_LOGS: {
        S: _owner_or_admin("user_id"),
        I: _anyone,
    },
}


def is_allowed(
    caller: Optional[SessionContext],
    table: Table,
    operation: Operation,
    row: Row,
) -> bool:
    predicate = POLICIES.get(Table(table), {}).get(Operation(operation))
    if predicate is None:
        return False
    return predicate(caller, row)


def authorize(
    caller: Optional[SessionContext],
    table: Table,
    operation: Operation,
    row: Row,
) -> None:
    """Raise 403 unless the policy for (table, operation) accepts the row."""
    if not is_allowed(caller, table, operation, row):
        logger.info(
            f"Denied {Operation(operation).value} on {Table(table).value} "
            f"row {row.get('id')} for {caller.user_id if caller else 'anonymous'}"
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not allowed to {Operation(operation).value} this {Table(table).value} row"
        )


def visible_rows(
    caller: Optional[SessionContext],
    table: Table,
    rows: Iterable[Row],
) -> List[Row]:
    """Apply the SELECT policy to a result set."""
    return [row for row in rows if is_allowed(caller, table, Operation.SELECT, row)]
