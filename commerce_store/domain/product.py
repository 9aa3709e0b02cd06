"""
Product Domain Model

Represents a product in the store catalog.
Order items hold a live reference to these objects, so a price change here
is seen by every order line that points at the product.

Date: 2026-10-18
"""
from pydantic import BaseModel, Field, ConfigDict, ValidationInfo, field_validator
from uuid import UUID

from commerce_store.domain.ordering import product_natural_key


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    Fields:
        id: Store-allocated identifier (immutable)
        name: Product name (trimmed, non-blank)
        category: Free-form category label (trimmed, non-blank)
        price: Unit price (int or float, >= 0, no coercion)
    """

    id: UUID = Field(..., description="Product ID", frozen=True)
    name: str = Field(..., description="Product name")
    category: str = Field(..., description="Product category")
    price: float = Field(..., description="Unit price", ge=0, strict=True)

    model_config = ConfigDict(validate_assignment=True)

    @field_validator('name', 'category')
    @classmethod
    def strip_not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(f"Product.{info.field_name} must not be blank")
        return value.strip()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: "Product") -> bool:
        return product_natural_key(self) < product_natural_key(other)

    def __str__(self) -> str:
        return (
            f"Product(id={self.id}, name='{self.name}', "
            f"category='{self.category}', price={self.price})"
        )

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary"""
        return self.model_dump(mode='json')
