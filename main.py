#!/usr/bin/env python3
"""
Login Router -- command line for the login service.

Usage:
  python main.py add-user alice@example.com
  python main.py add-user alice@example.com --password s3cret
  python main.py login alice@example.com
  python main.py serve --host 0.0.0.0 --port 8000

Environment variables (see core/config.py):
  SECRET_KEY    JWT signing key, at least 32 characters. Required unless DEBUG=true.
  AUTH_DB_URL   SQLAlchemy URL of the user store.
  LOG_LEVEL     Root log level (default INFO).
"""

import argparse
import asyncio
import getpass
import json
import logging
import sys
from collections.abc import Mapping
from typing import Optional

from core.config import get_settings


def _read_password(given: Optional[str]) -> str:
    if given is not None:
        return given
    return getpass.getpass("Password: ")


def _open_store():
    from auth.store import UserStore

    return UserStore(get_settings().auth_db_url)


def cmd_add_user(args: argparse.Namespace) -> int:
    from auth.models import User
    from auth.tokens import hash_password

    password = _read_password(args.password)
    if not args.email or not password:
        print("  [!] Email and password must both be non-empty.")
        return 1

    store = _open_store()
    try:
        user_id = store.create_user(User(email=args.email, hashed_password=hash_password(password)))
    except ValueError as e:
        print(f"  [!] {e}")
        return 1
    finally:
        store.close()
    print(f"  [+] Created user {args.email} (id={user_id})")
    return 0


def cmd_login(args: argparse.Namespace) -> int:
    """Run one login through the router and print the response as JSON."""
    from auth.password import PasswordAuthProvider
    from core.errors import HttpError
    from core.login_router import LoginRouter
    from core.models import HttpRequest, LoginBody

    password = _read_password(args.password)
    store = _open_store()
    try:
        router = LoginRouter(PasswordAuthProvider(store))
        result = asyncio.run(router.route(HttpRequest(body=LoginBody(email=args.email, password=password))))
    finally:
        store.close()

    body = result.body
    if isinstance(body, HttpError):
        body = {"error": {"code": body.code, "message": body.message}}
    elif isinstance(body, Mapping):
        body = dict(body)
    print(json.dumps({"statusCode": result.status_code, "body": body}, indent=2))
    return 0 if result.status_code == 200 else 1


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("asgi:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Login Router -- email/password login that returns a signed access token.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    add_user = sub.add_parser("add-user", help="Create a user in the auth store")
    add_user.add_argument("email")
    add_user.add_argument("--password", help="Password (prompted when omitted)")
    add_user.set_defaults(func=cmd_add_user)

    login = sub.add_parser("login", help="Try a login and print the response")
    login.add_argument("email")
    login.add_argument("--password", help="Password (prompted when omitted)")
    login.set_defaults(func=cmd_login)

    serve = sub.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
