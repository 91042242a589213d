from learning_backend import errors
from learning_backend.models.user import User


def require_admin(user: User) -> User:
    if not user.is_admin:
        raise errors.Forbidden()
    return user
