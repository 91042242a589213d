from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt import PyJWTError
from sqlalchemy.orm import Session

from learning_backend import errors
from learning_backend.auth import jwt_handler
from learning_backend.auth.guard import require_admin
from learning_backend.database import get_db
from learning_backend.models.user import User
from learning_backend.repositories.user_repository import UserRepository

# auto_error is off so a missing header goes through the error taxonomy.
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None:
        raise errors.Unauthenticated()

    try:
        user_id = jwt_handler.read_user_id(credentials.credentials)
    except PyJWTError as exc:
        raise errors.Unauthenticated("Invalid token.") from exc

    user = UserRepository(db).get(user_id)
    if user is None:
        raise errors.Unauthenticated("User not found.")
    return user


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    return require_admin(current_user)
