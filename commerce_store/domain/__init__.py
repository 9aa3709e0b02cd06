"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce field validation on construction and on every assignment.

Date: 2026-10-18
"""
from commerce_store.domain.customer import Customer
from commerce_store.domain.product import Product
from commerce_store.domain.order import Order, OrderItem, OrderStatus

__all__ = ['Customer', 'Product', 'Order', 'OrderItem', 'OrderStatus']
