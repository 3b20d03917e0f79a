"""
Grant or revoke an application role.
user_roles has no client-facing write policies, so this script (run with the
service-role key) is the only way to make someone an admin.

    python -m app.scripts.grant_role <user_id> --role admin
    python -m app.scripts.grant_role <user_id> --role admin --revoke
"""

import argparse
import sys

from app.config import settings
from app.core.session import APP_ROLES
from app.database.supabase_client import get_service_supabase
from app.modules.roles.service import RoleAdminService
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Grant or revoke an application role")
    parser.add_argument("user_id", help="auth.users id of the target user")
    parser.add_argument("--role", choices=APP_ROLES, default="admin")
    parser.add_argument("--revoke", action="store_true", help="Remove the role instead of granting it")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if not settings.supabase_service_role_key:
        logger.error("SUPABASE_SERVICE_ROLE_KEY is required to change roles")
        sys.exit(1)

    service = RoleAdminService(get_service_supabase())
    try:
        if args.revoke:
            changed = service.revoke(args.user_id, args.role)
            logger.info(f"{'Revoked' if changed else 'Nothing to revoke:'} {args.role} for {args.user_id}")
        else:
            changed = service.grant(args.user_id, args.role)
            logger.info(f"{'Granted' if changed else 'Already held:'} {args.role} for {args.user_id}")
    except Exception as e:
        logger.error(f"Error updating role: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
