"""
Ordering Policies

Sort keys for customers and products. The natural keys back the store's
ordered views; the standing keys are applied by callers to snapshots.

All functions are pure: they read entity fields and never mutate anything.

Date: 2026-10-18
"""
from typing import Iterable, List, Tuple, TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from commerce_store.domain.customer import Customer
    from commerce_store.domain.product import Product


# ================================================================================
# NATURAL ORDER (used by the store's ordered views)
# ================================================================================

def customer_natural_key(customer: "Customer") -> Tuple[str, str, UUID]:
    """name (case-insensitive) -> email (case-insensitive) -> id"""
    return (customer.name.lower(), customer.email.lower(), customer.id)


def product_natural_key(product: "Product") -> Tuple[str, str, float, UUID]:
    """name (case-insensitive) -> category (case-insensitive) -> price -> id"""
    return (product.name.lower(), product.category.lower(), product.price, product.id)


# ================================================================================
# STANDING ORDERS (applied ad hoc to list_*() snapshots)
# ================================================================================

def by_price_desc_then_name_then_category(product: "Product") -> Tuple[float, str, str]:
    """Most expensive first, then name and category (case-insensitive)"""
    return (-product.price, product.name.lower(), product.category.lower())


def by_points_desc_then_name(customer: "Customer") -> Tuple[int, str]:
    """Most loyalty points first, then name (case-insensitive)"""
    return (-customer.loyalty_points, customer.name.lower())


def sort_products_by_price(products: Iterable["Product"]) -> List["Product"]:
    """Return a new list sorted by price desc, name, category"""
    return sorted(products, key=by_price_desc_then_name_then_category)


def sort_customers_by_points(customers: Iterable["Customer"]) -> List["Customer"]:
    """Return a new list sorted by loyalty points desc, name"""
    return sorted(customers, key=by_points_desc_then_name)
