"""
Create a user (e.g. first admin). Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD "FULL NAME" [role]
Example:
  python -m app.scripts.create_user admin@example.com your-secure-password "Site Admin" admin
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from app.core.config import get_settings
from app.core.database import create_db_engine, create_session_factory
from app.core.errors import AppError
from app.core.logging_config import configure_logging
from app.core.security import TokenService
from app.schemas.auth import RegisterRequest
from app.services.auth import AuthService
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)

ROLES = ("user", "admin")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Product API user from the command line.")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (at least 6 chars)")
    parser.add_argument("full_name", help="Full name (at least 2 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=ROLES)
    args = parser.parse_args(argv)

    try:
        body = RegisterRequest(
            email=args.email.strip(),
            password=args.password,
            full_name=args.full_name.strip(),
        )
    except ValidationError as e:
        for err in e.errors():
            print(f"Invalid {'.'.join(str(p) for p in err['loc'])}: {err['msg']}", file=sys.stderr)
        return 1

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    engine = create_db_engine(settings)
    db = create_session_factory(engine)()
    try:
        auth = AuthService(UserStore(db), TokenService(settings.JWT_SECRET.get_secret_value()))
        try:
            user = auth.register(body.email, body.password, body.full_name, role=args.role)
        except AppError as e:
            print(e.message, file=sys.stderr)
            return 1
        print(f"Created user '{user.email}' ({user.id}) with role '{user.role}'.")
        return 0
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
