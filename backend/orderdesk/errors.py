"""Domain exceptions raised by the service layer."""

from typing import Any


class OrderdeskError(Exception):
    """Base class for domain failures the HTTP layer maps to a status code."""


class NotFoundError(OrderdeskError):
    """The requested entity id does not exist."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found.")


class ConflictError(OrderdeskError):
    """The write would break a uniqueness rule checked by the application."""


class DuplicateEmailError(ConflictError):
    """A user with this email address already exists."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"The email address '{email}' is already in use.")


class DuplicateAddressError(ConflictError):
    """The user already has a delivery address."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} already has a delivery address.")
