import logging

from learning_backend import errors
from learning_backend.models.user import User, UserRole
from learning_backend.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UserRepository):
        self.users = users

    def get_user(self, user_id: int) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise errors.NotFound('User not found.')
        return user

    def list_users(self) -> list[User]:
        return self.users.list_all()

    def set_role(self, user_id: int, role: UserRole) -> User:
        user = self.get_user(user_id)
        user = self.users.set_role(user, role)
        logger.info('Set role of user %s to %s', user.id, role.value)
        return user

    def delete_user(self, user_id: int) -> None:
        user = self.get_user(user_id)
        self.users.delete(user)
        logger.info('Deleted user %s', user_id)
