from learning_backend.models.user import User, UserRole
from learning_backend.repositories.base import SqlRepository, is_storable_id


class UserRepository(SqlRepository):
    def get(self, user_id: int) -> User | None:
        if not is_storable_id(user_id):
            return None
        return self.db.get(User, user_id)

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def list_all(self) -> list[User]:
        return self.db.query(User).order_by(User.id.asc()).all()

    def create(self, email: str, hashed_password: str, name: str) -> User:
        user = User(
            email=email,
            hashed_password=hashed_password,
            name=name,
            role=UserRole.USER,
        )
        self.db.add(user)
        self._commit(conflict_message='User already exists.')
        self.db.refresh(user)
        return user

    def set_role(self, user: User, role: UserRole) -> User:
        user.role = role
        self._commit()
        self.db.refresh(user)
        return user

    def delete(self, user: User) -> None:
        self.db.delete(user)
        self._commit()
