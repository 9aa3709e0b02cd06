"""
Customer Domain Model

Represents a customer entity held by the DataStore.
Identity is the store-allocated id; every other field is validated on
construction and again on every assignment.

Date: 2026-10-18
"""
from pydantic import BaseModel, Field, ConfigDict, ValidationInfo, field_validator
from uuid import UUID

from commerce_store.domain.ordering import customer_natural_key


class Customer(BaseModel):
    """
    Customer domain model

    Fields:
        id: Store-allocated identifier (immutable)
        name: Display name (trimmed, non-blank)
        email: Contact email (trimmed, non-blank, unique across the store)
        loyalty_points: Accumulated loyalty points (int, >= 0, no coercion)

    Equality and hashing depend only on `id`. Natural ordering is
    name -> email -> id, case-insensitive on the text fields.
    """

    id: UUID = Field(..., description="Customer ID", frozen=True)
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email")
    loyalty_points: int = Field(0, description="Loyalty points", ge=0, strict=True)

    model_config = ConfigDict(validate_assignment=True)

    @field_validator('name', 'email')
    @classmethod
    def strip_not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(f"Customer.{info.field_name} must not be blank")
        return value.strip()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: "Customer") -> bool:
        return customer_natural_key(self) < customer_natural_key(other)

    def __str__(self) -> str:
        return (
            f"Customer(id={self.id}, name='{self.name}', "
            f"email='{self.email}', points={self.loyalty_points})"
        )

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary"""
        return self.model_dump(mode='json')
