"""
Order Domain Models

Represents orders and their line items.

Line items reference the live Product held by the store (never a copy), so
totals always reflect current prices. Totals are recomputed on every read.

Date: 2026-10-18
"""
from pydantic import BaseModel, Field, ConfigDict, PrivateAttr
from typing import List, Tuple
from datetime import datetime
from enum import Enum
from uuid import UUID

from commerce_store.domain.product import Product


class OrderStatus(str, Enum):
    """Order status. Any status may follow any other."""
    NEW = "NEW"
    PAID = "PAID"
    SHIPPED = "SHIPPED"
    CANCELLED = "CANCELLED"


class OrderItem(BaseModel):
    """
    Order Item domain model - represents a line item in an order

    Fields:
        product: Shared reference to the catalog product
        qty: Number of units ordered (int, > 0)
    """

    product: Product = Field(..., description="Referenced product")
    qty: int = Field(..., description="Quantity ordered", gt=0, strict=True)

    model_config = ConfigDict(validate_assignment=True)

    @property
    def line_total(self) -> float:
        """Current product price times quantity"""
        return self.product.price * self.qty

    def __str__(self) -> str:
        return f"OrderItem(product={self.product.name}, qty={self.qty}, total={self.line_total})"

    def to_dict(self) -> dict:
        """Convert to dictionary with the computed line total"""
        return {
            'product_id': str(self.product.id),
            'product_name': self.product.name,
            'qty': self.qty,
            'line_total': self.line_total,
        }


class Order(BaseModel):
    """
    Order domain model - represents a customer order

    Fields:
        id: Store-allocated identifier (immutable)
        customer_id: Owning customer, captured at creation (immutable)
        created_at: Creation timestamp (immutable, keys the time index)
        status: Current OrderStatus

    Items are kept in insertion order; the same product may appear on
    several lines.
    """

    id: UUID = Field(..., description="Order ID", frozen=True)
    customer_id: UUID = Field(..., description="Owning customer ID", frozen=True)
    created_at: datetime = Field(..., description="Creation timestamp", frozen=True)
    status: OrderStatus = Field(OrderStatus.NEW, description="Order status")

    _items: List[OrderItem] = PrivateAttr(default_factory=list)

    model_config = ConfigDict(validate_assignment=True)

    @property
    def items(self) -> Tuple[OrderItem, ...]:
        """Read-only view of the line items"""
        return tuple(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def total(self) -> float:
        """Sum of line totals at read time"""
        return sum((item.line_total for item in self._items), 0.0)

    def add_item(self, product: Product, qty: int) -> OrderItem:
        """Append a new line referencing `product`"""
        item = OrderItem(product=product, qty=qty)
        self._items.append(item)
        return item

    def remove_items_by_product_id(self, product_id: UUID) -> int:
        """
        Drop every line referencing the given product

        Returns:
            Number of lines removed
        """
        kept = [item for item in self._items if item.product.id != product_id]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"Order(id={self.id}, customer_id={self.customer_id}, status={self.status.value}, "
            f"items={self.item_count}, total={self.total}, created_at={self.created_at.isoformat()})"
        )

    def to_dict(self) -> dict:
        """Convert to dictionary with items and the computed total"""
        data = self.model_dump(mode='json')
        data['items'] = [item.to_dict() for item in self._items]
        data['total'] = self.total
        return data
