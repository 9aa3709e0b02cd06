"""
Analytics Service - read-only reporting over store snapshots

Works on the lists returned by DataStore.list_*() and never mutates them.

Date: 2026-10-18
"""
from collections import defaultdict
from typing import Dict, Iterable, List, Optional
from uuid import UUID

from commerce_store.domain.customer import Customer
from commerce_store.domain.order import Order
from commerce_store.domain.product import Product

NO_EMAIL = "NO_EMAIL"


class AnalyticsService:
    """
    Aggregations over already-materialized entity lists

    Example:
        >>> AnalyticsService.total_revenue(store.list_orders())
        32400.0
    """

    @staticmethod
    def expensive_product_names(products: Iterable[Product], min_price: float) -> List[str]:
        """
        Names of products priced at or above `min_price`

        Returns:
            Distinct names, sorted case-insensitively
        """
        names = dict.fromkeys(p.name for p in products if p.price >= min_price)
        return sorted(names, key=str.lower)

    @staticmethod
    def avg_price_by_category(products: Iterable[Product]) -> Dict[str, float]:
        """Average price per category"""
        prices: Dict[str, List[float]] = defaultdict(list)
        for product in products:
            prices[product.category].append(product.price)

        return {category: sum(values) / len(values) for category, values in prices.items()}

    @staticmethod
    def total_revenue(orders: Iterable[Order]) -> float:
        """Sum of order totals at current prices"""
        return sum((order.total for order in orders), 0.0)

    @staticmethod
    def revenue_by_status(orders: Iterable[Order]) -> Dict[str, float]:
        """Order totals grouped by status value"""
        revenue: Dict[str, float] = defaultdict(float)
        for order in orders:
            revenue[order.status.value] += order.total
        return dict(revenue)

    @staticmethod
    def revenue_by_customer(orders: Iterable[Order]) -> Dict[UUID, float]:
        """Order totals grouped by owning customer id"""
        revenue: Dict[UUID, float] = defaultdict(float)
        for order in orders:
            revenue[order.customer_id] += order.total
        return dict(revenue)

    @staticmethod
    def safe_customer_email(customer: Optional[Customer]) -> str:
        """The customer's email, or NO_EMAIL if absent or without '@'"""
        if customer is None or "@" not in customer.email:
            return NO_EMAIL
        return customer.email

    @staticmethod
    def top_customer(customers: Iterable[Customer]) -> Optional[Customer]:
        """Customer with the most loyalty points (first one wins ties)"""
        return max(customers, key=lambda c: c.loyalty_points, default=None)
