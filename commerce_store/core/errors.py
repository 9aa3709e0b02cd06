"""
Store exceptions

Hierarchy:
- StoreError (base)
- EntityNotFoundError (also a LookupError)
- DuplicateEmailError (also a ValueError, like field validation errors)

Field validation failures are raised by the domain models as
pydantic.ValidationError, which is a ValueError as well.
"""
from typing import Any, Optional


class StoreError(Exception):
    """Base class for errors raised by the DataStore"""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class EntityNotFoundError(StoreError, LookupError):
    """
    Raised when an operation references an id that is not in the store

    Example:
        >>> try:
        ...     store.create_order(unknown_customer_id)
        ... except EntityNotFoundError as e:
        ...     print(e.entity, e.entity_id)
    """

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(
            f"{entity} not found: {entity_id}",
            details={"entity": entity, "entity_id": str(entity_id)},
        )
        self.entity = entity
        self.entity_id = entity_id


class DuplicateEmailError(StoreError, ValueError):
    """Raised when an email is already used by another live customer"""

    def __init__(self, email: str):
        super().__init__(f"Email already exists: {email}", details={"email": email})
        self.email = email
