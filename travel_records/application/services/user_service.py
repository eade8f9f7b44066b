"""User service - credentials and unique usernames/emails."""
import logging
from typing import Optional

from travel_records.application.services.entity_service import EntityService
from travel_records.core.security import hash_password
from travel_records.domain.entities import User
from travel_records.domain.exceptions import InvalidCredentialsError, NotFoundError

logger = logging.getLogger(__name__)


class UserService(EntityService[User]):
    """Users: passwords are hashed on every write, usernames and emails are unique."""

    kind = User

    def authenticate(self, username: str, password: str) -> User:
        """Resolve a login.

        Raises:
            NotFoundError: no user has this username
            InvalidCredentialsError: the password does not match
        """
        if not self._store.exists(User, username=username):
            raise NotFoundError(f"User '{username}' not found")

        matches = self._store.find(User, username=username, password=hash_password(password))
        if matches:
            return matches[0]

        logger.info(f"Wrong password for user '{username}'")
        raise InvalidCredentialsError(username)

    def _check_create_conflicts(self, entity: User):
        self._validator.check_unique(entity)

    def _check_update_conflicts(self, entity: User, persisted: Optional[User]):
        self._validator.check_unique_changes(entity, persisted)

    def _prepare_create(self, entity: User):
        entity.password = hash_password(entity.password)

    def _prepare_update(self, entity: User, persisted: Optional[User]):
        entity.password = hash_password(entity.password)

    def _explains_create_conflict(self, entity: User) -> bool:
        return (
            self.exists(entity.id)
            or self._store.exists(User, username=entity.username)
            or self._store.exists(User, email=entity.email)
        )

    def _explains_update_conflict(self, entity: User) -> bool:
        for field in ("username", "email"):
            holders = self._store.find(User, **{field: getattr(entity, field)})
            if any(holder.id != entity.id for holder in holders):
                return True
        return False
