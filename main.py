#!/usr/bin/env python3
"""
AccountDesk -- command-line helpers for the account credential model.

Usage:
  python main.py hash
  python main.py check-default '$2b$12$...'
  python main.py show --name "Ada" --email ada@example.com --hash '$2b$12$...'
  python main.py providers

Environment variables:
  APP_ENV               "local" disables outbound TLS verification (default: production).
  GOOGLE_CLIENT_ID      Google OAuth client ID.
  GOOGLE_CLIENT_SECRET  Google OAuth client secret.
"""

import argparse
import getpass
import json
import logging
import sys
from typing import Optional

from api.models import OAuthProviderInfo, UserResponse
from auth.models import User, is_using_default_credential, validate_required_fields
from auth.oauth import get_enabled_providers
from auth.passwords import hash_password
from core.config import get_settings

logger = logging.getLogger("accountdesk.cli")


def _cmd_hash(args: argparse.Namespace) -> int:
    plain = args.password if args.password is not None else getpass.getpass("Password: ")
    if not plain:
        print("  [!] Password must not be empty.")
        return 1
    try:
        hashed = hash_password(plain)
    except ValueError as e:
        print(f"  [!] {e}")
        return 1
    print(hashed)
    return 0


def _cmd_check_default(args: argparse.Namespace) -> int:
    """Exit 0 when the hash is the default credential, 1 when it is not (grep-style)."""
    user = User(name="-", email="-", password=args.hash)
    if is_using_default_credential(user):
        print("default credential: yes")
        return 0
    print("default credential: no")
    return 1


def _cmd_show(args: argparse.Namespace) -> int:
    user = User(name=args.name, email=args.email, password=args.hash or None)
    try:
        validate_required_fields(user)
    except ValueError as e:
        print(f"  [!] {e}")
        return 1
    print(UserResponse.from_user(user).model_dump_json(indent=2))
    return 0


def _cmd_providers(args: argparse.Namespace) -> int:
    providers = [OAuthProviderInfo(**p) for p in get_enabled_providers()]
    if args.json:
        print(json.dumps([p.model_dump() for p in providers], indent=2))
    elif not providers:
        print("No OAuth providers configured.")
    else:
        for p in providers:
            print(f"  {p.name:<10} {p.label}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="accountdesk",
        description="Credential helpers for AccountDesk user records.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py hash
  python main.py check-default "$(cat stored_hash.txt)"
  python main.py show --name Ada --email ada@example.com
  APP_ENV=local python main.py providers --json
        """,
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    p_hash = sub.add_parser("hash", help="Print a bcrypt hash of a password (prompts if --password is omitted)")
    p_hash.add_argument("--password", default=None, help="Plaintext password (avoid: ends up in shell history)")
    p_hash.set_defaults(func=_cmd_hash)

    p_check = sub.add_parser("check-default", help="Report whether a stored hash is the default OAuth credential")
    p_check.add_argument("hash", help="Stored bcrypt hash")
    p_check.set_defaults(func=_cmd_check_default)

    p_show = sub.add_parser("show", help="Print the public JSON representation of a user")
    p_show.add_argument("--name", required=True)
    p_show.add_argument("--email", required=True)
    p_show.add_argument("--hash", default=None, help="Stored bcrypt hash, if any")
    p_show.set_defaults(func=_cmd_show)

    p_providers = sub.add_parser("providers", help="List configured OAuth providers")
    p_providers.add_argument("--json", action="store_true", help="Output JSON")
    p_providers.set_defaults(func=_cmd_providers)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 0

    try:
        settings = get_settings()
    except ValueError as e:
        # pydantic.ValidationError subclasses ValueError
        print(f"  [!] Invalid configuration: {e}")
        return 1

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.debug("Running %s (APP_ENV=%s)", args.command, settings.app_env)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
