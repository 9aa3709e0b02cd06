"""
Data Store - In-memory repository for customers, products and orders

The DataStore owns every entity and every index, and is the only component
that mutates them.

Indexes:
    - primary maps (id -> entity) for customers, products, orders
    - customer email set (uniqueness constraint)
    - product category set (derived, rebuilt by full scan)
    - customers and products in natural order (SortedIndex)
    - orders by creation time (SortedIndex keyed by (created_at, id))

Updates that touch sort-key fields follow remove -> mutate -> reinsert.
All supplied values are validated before any index is touched, so a failed
update leaves the store unchanged.

Date: 2026-10-18
"""
import logging
from datetime import datetime
from typing import Callable, Dict, FrozenSet, List, Optional, Set, Tuple, Union
from uuid import UUID, uuid4

from commerce_store.core.errors import DuplicateEmailError, EntityNotFoundError
from commerce_store.domain.customer import Customer
from commerce_store.domain.order import Order, OrderStatus
from commerce_store.domain.ordering import customer_natural_key, product_natural_key
from commerce_store.domain.product import Product
from commerce_store.repositories.sorted_index import SortedIndex

logger = logging.getLogger(__name__)


class DataStore:
    """
    Multi-index store for Customer, Product and Order entities

    Single-writer: every public method runs to completion synchronously.
    Unordered listings return fresh lists; ordered views return tuples.

    Args:
        clock: Returns the creation timestamp for new orders
        id_factory: Allocates identifiers for new entities
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], UUID] = uuid4,
    ):
        self._clock = clock
        self._new_id = id_factory

        self._customers_by_id: Dict[UUID, Customer] = {}
        self._products_by_id: Dict[UUID, Product] = {}
        self._orders_by_id: Dict[UUID, Order] = {}

        self._customer_emails: Set[str] = set()
        self._product_categories: Set[str] = set()

        self._customers_sorted: SortedIndex[Customer] = SortedIndex(
            key=customer_natural_key, identity=lambda c: c.id
        )
        self._products_sorted: SortedIndex[Product] = SortedIndex(
            key=product_natural_key, identity=lambda p: p.id
        )
        self._orders_by_time: SortedIndex[Order] = SortedIndex(
            key=lambda o: (o.created_at, o.id), identity=lambda o: o.id
        )

    # ================================================================================
    # CUSTOMERS
    # ================================================================================

    def create_customer(self, name: str, email: str, points: int = 0) -> Customer:
        """
        Create a customer

        Raises:
            ValidationError: blank name/email or negative points
            DuplicateEmailError: email already used by a live customer
        """
        customer = Customer(id=self._new_id(), name=name, email=email, loyalty_points=points)
        if customer.email in self._customer_emails:
            raise DuplicateEmailError(customer.email)

        self._customers_by_id[customer.id] = customer
        self._customer_emails.add(customer.email)
        self._customers_sorted.add(customer)

        logger.debug(f"Created customer {customer.id} ({customer.email})")
        return customer

    def read_customer(self, customer_id: UUID) -> Optional[Customer]:
        return self._customers_by_id.get(customer_id)

    def update_customer(
        self,
        customer_id: UUID,
        name: Optional[str] = None,
        email: Optional[str] = None,
        points: Optional[int] = None,
    ) -> Customer:
        """
        Update the supplied fields of a customer

        The email conflict is checked against the other customers before the
        old email leaves the uniqueness set.

        Raises:
            EntityNotFoundError: unknown customer
            ValidationError: invalid field value
            DuplicateEmailError: email used by another customer
        """
        customer = self._customers_by_id.get(customer_id)
        if customer is None:
            raise EntityNotFoundError("Customer", customer_id)

        changes = {}
        if name is not None:
            changes['name'] = name
        if email is not None:
            changes['email'] = email
        if points is not None:
            changes['loyalty_points'] = points

        candidate = Customer.model_validate({**customer.model_dump(), **changes})
        if candidate.email != customer.email and candidate.email in self._customer_emails:
            raise DuplicateEmailError(candidate.email)

        self._customers_sorted.remove(customer)
        self._customer_emails.discard(customer.email)

        if name is not None:
            customer.name = name
        if email is not None:
            customer.email = email
        if points is not None:
            customer.loyalty_points = points

        self._customer_emails.add(customer.email)
        self._customers_sorted.add(customer)

        logger.debug(f"Updated customer {customer.id}: {sorted(changes)}")
        return customer

    def delete_customer(self, customer_id: UUID) -> bool:
        """
        Delete a customer and every order it owns

        Returns:
            False if the customer did not exist
        """
        customer = self._customers_by_id.pop(customer_id, None)
        if customer is None:
            return False

        self._customer_emails.discard(customer.email)
        self._customers_sorted.remove(customer)

        owned = [order.id for order in self.customer_orders(customer_id)]
        for order_id in owned:
            self.delete_order(order_id)

        logger.info(f"Deleted customer {customer_id} and {len(owned)} order(s)")
        return True

    def list_customers(self) -> List[Customer]:
        return list(self._customers_by_id.values())

    def list_customers_ordered(self) -> Tuple[Customer, ...]:
        """Customers in natural order (name, email, id)"""
        return self._customers_sorted.snapshot()

    def customer_orders(self, customer_id: UUID) -> List[Order]:
        """Orders owned by a customer, in no particular order"""
        return [order for order in self._orders_by_id.values() if order.customer_id == customer_id]

    # ================================================================================
    # PRODUCTS
    # ================================================================================

    def create_product(self, name: str, category: str, price: float) -> Product:
        product = Product(id=self._new_id(), name=name, category=category, price=price)

        self._products_by_id[product.id] = product
        self._product_categories.add(product.category)
        self._products_sorted.add(product)

        logger.debug(f"Created product {product.id} ({product.name}, {product.category})")
        return product

    def read_product(self, product_id: UUID) -> Optional[Product]:
        return self._products_by_id.get(product_id)

    def update_product(
        self,
        product_id: UUID,
        name: Optional[str] = None,
        category: Optional[str] = None,
        price: Optional[float] = None,
    ) -> Product:
        """
        Update the supplied fields of a product

        The category set is rebuilt from all live products when the
        category changes.

        Raises:
            EntityNotFoundError: unknown product
            ValidationError: invalid field value
        """
        product = self._products_by_id.get(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)

        changes = {}
        if name is not None:
            changes['name'] = name
        if category is not None:
            changes['category'] = category
        if price is not None:
            changes['price'] = price
        Product.model_validate({**product.model_dump(), **changes})

        self._products_sorted.remove(product)
        old_category = product.category

        if name is not None:
            product.name = name
        if category is not None:
            product.category = category
        if price is not None:
            product.price = price

        self._products_sorted.add(product)
        self._product_categories.add(product.category)

        if old_category != product.category:
            self._recompute_categories()

        logger.debug(f"Updated product {product.id}: {sorted(changes)}")
        return product

    def delete_product(self, product_id: UUID) -> bool:
        """
        Delete a product and strip its lines from every order

        Orders are kept even when left without items.

        Returns:
            False if the product did not exist
        """
        product = self._products_by_id.pop(product_id, None)
        if product is None:
            return False

        self._products_sorted.remove(product)
        self._recompute_categories()

        removed_lines = 0
        touched_orders = 0
        for order in self._orders_by_id.values():
            removed = order.remove_items_by_product_id(product_id)
            if removed:
                removed_lines += removed
                touched_orders += 1

        logger.info(
            f"Deleted product {product_id}; removed {removed_lines} line(s) from {touched_orders} order(s)"
        )
        return True

    def list_products(self) -> List[Product]:
        return list(self._products_by_id.values())

    def list_products_ordered(self) -> Tuple[Product, ...]:
        """Products in natural order (name, category, price, id)"""
        return self._products_sorted.snapshot()

    def list_categories(self) -> FrozenSet[str]:
        """Categories of the live products (maintained, not recomputed here)"""
        return frozenset(self._product_categories)

    def _recompute_categories(self) -> None:
        self._product_categories = {product.category for product in self._products_by_id.values()}

    # ================================================================================
    # ORDERS
    # ================================================================================

    def create_order(self, customer_id: UUID) -> Order:
        """
        Create an empty NEW order for an existing customer

        Raises:
            EntityNotFoundError: unknown customer
        """
        if customer_id not in self._customers_by_id:
            raise EntityNotFoundError("Customer", customer_id)

        order = Order(id=self._new_id(), customer_id=customer_id, created_at=self._clock())
        self._orders_by_id[order.id] = order
        self._orders_by_time.add(order)

        logger.debug(
            f"Created order {order.id} for customer {customer_id} at {order.created_at.isoformat()} "
            f"({len(self._orders_by_time)} indexed)"
        )
        return order

    def read_order(self, order_id: UUID) -> Optional[Order]:
        return self._orders_by_id.get(order_id)

    def add_item_to_order(self, order_id: UUID, product_id: UUID, qty: int) -> Order:
        """
        Append a line for `qty` units of a product (no stock check)

        Raises:
            EntityNotFoundError: unknown order or product
            ValidationError: qty <= 0
        """
        order = self._orders_by_id.get(order_id)
        if order is None:
            raise EntityNotFoundError("Order", order_id)

        product = self._products_by_id.get(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)

        order.add_item(product, qty)
        return order

    def update_order_status(self, order_id: UUID, status: Union[OrderStatus, str]) -> Order:
        order = self._orders_by_id.get(order_id)
        if order is None:
            raise EntityNotFoundError("Order", order_id)

        order.status = status
        logger.debug(f"Order {order_id} status -> {order.status.value}")
        return order

    def delete_order(self, order_id: UUID) -> bool:
        order = self._orders_by_id.pop(order_id, None)
        if order is None:
            return False

        self._orders_by_time.remove(order)
        logger.debug(f"Deleted order {order_id} ({len(self._orders_by_time)} remaining)")
        return True

    def list_orders(self) -> List[Order]:
        return list(self._orders_by_id.values())

    def list_orders_by_time(self) -> Tuple[Tuple[datetime, UUID], ...]:
        """
        (created_at, order_id) pairs in ascending creation time

        Orders created at the same instant are all kept, ordered by id.
        """
        return self._orders_by_time.keys()
