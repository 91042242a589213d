"""Grant the admin role to an existing account.

Promotion over HTTP is itself admin-only, so the first administrator has to
be created from the command line against the configured database.

Usage:
    python -m learning_backend.promote_admin user@example.com
"""
import sys

from sqlalchemy.orm import Session, sessionmaker

from learning_backend import errors
from learning_backend.database import SessionLocal
from learning_backend.models.user import UserRole
from learning_backend.repositories.user_repository import UserRepository
from learning_backend.services.user_service import UserService


def promote(db: Session, email: str) -> int:
    users = UserRepository(db)
    account = users.find_by_email(email)
    if account is None:
        raise errors.NotFound(f'No user registered with email {email}.')
    UserService(users).set_role(account.id, UserRole.ADMIN)
    return account.id


def main(argv: list[str] | None = None, session_factory: sessionmaker = SessionLocal) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(__doc__.strip(), file=sys.stderr)
        return 2

    db = session_factory()
    try:
        user_id = promote(db, args[0].strip())
    except errors.ServiceError as exc:
        print(exc.message, file=sys.stderr)
        return 1
    finally:
        db.close()

    print(f'User {user_id} ({args[0].strip()}) is now an admin.')
    return 0


if __name__ == '__main__':
    sys.exit(main())
