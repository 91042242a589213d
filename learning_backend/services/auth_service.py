import logging
from dataclasses import dataclass

from learning_backend import errors
from learning_backend.auth import jwt_handler
from learning_backend.auth.passwords import hash_password, verify_password
from learning_backend.models.user import User
from learning_backend.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    user: User
    token: str


def _require(value: str | None, field: str) -> str:
    if value is None or not value.strip():
        raise errors.ValidationError(f'{field} is required.')
    return value


class AuthService:
    """Account creation and sign-in against the identity store."""

    def __init__(self, users: UserRepository):
        self.users = users

    def signup(self, email: str, password: str, name: str) -> AuthResult:
        email = _require(email, 'Email').strip()
        password = _require(password, 'Password')
        name = _require(name, 'Name').strip()

        # The unique index on email decides the race between identical signups.
        user = self.users.create(email=email, hashed_password=hash_password(password), name=name)
        logger.info('Created user %s (%s)', user.id, user.email)
        return AuthResult(user=user, token=self._issue_token(user))

    def signin(self, email: str, password: str) -> AuthResult:
        user = self.users.find_by_email((email or '').strip())
        # Unknown email and wrong password are indistinguishable to the caller.
        if user is None or not verify_password(password or '', user.hashed_password):
            logger.info('Failed sign-in for %s', email)
            raise errors.InvalidCredentials()

        logger.info('User %s signed in', user.id)
        return AuthResult(user=user, token=self._issue_token(user))

    @staticmethod
    def _issue_token(user: User) -> str:
        return jwt_handler.create_access_token(user.id)
