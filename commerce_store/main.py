"""
commerce-store - demo driver

Runs a fixed scenario against a fresh DataStore and prints the resulting
snapshots, ordered views and reports, then (optionally) the container
benchmark.
"""
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables before settings are built
env_path = Path.cwd() / ".env"
load_dotenv(env_path)

from commerce_store.core.config import Settings, settings as default_settings
from commerce_store.core.errors import DuplicateEmailError
from commerce_store.domain import OrderStatus
from commerce_store.domain.ordering import sort_customers_by_points, sort_products_by_price
from commerce_store.repositories import DataStore
from commerce_store.services.analytics_service import AnalyticsService
from commerce_store.services.benchmark_service import ContainerBenchmark

logger = logging.getLogger(__name__)


def _section(title: str) -> None:
    print(f"\n[{title}]")


def run_demo(store: DataStore, settings: Settings = default_settings) -> DataStore:
    """Run the demo scenario on `store` and print every step"""
    print("=" * 70)
    print("Data management demo (Customers / Products / Orders)")
    print("=" * 70)

    olena = store.create_customer("Olena", "olena@mail.com", 120)
    andrii = store.create_customer("Andrii", "andrii@mail.com", 45)
    maria = store.create_customer("Maria", "maria@mail.com", 200)

    _section("Customers created")
    for customer in store.list_customers():
        print(customer)

    _section("Duplicate email is rejected")
    try:
        store.create_customer("Olga", "olena@mail.com", 10)
    except DuplicateEmailError as e:
        print(f"Rejected: {e}")

    store.update_customer(andrii.id, name="Andrii K.", points=60)

    _section("Read customer safely")
    print(f"Email safe: {AnalyticsService.safe_customer_email(store.read_customer(andrii.id))}")

    laptop = store.create_product("Laptop", "Electronics", 32000)
    mouse = store.create_product("Mouse", "Electronics", 700)
    coffee = store.create_product("Coffee", "Food", 250)
    store.create_product("Headphones", "Electronics", 2200)
    tea = store.create_product("Tea", "Food", 180)

    _section("Products created")
    for product in store.list_products():
        print(product)

    first = store.create_order(olena.id)
    store.add_item_to_order(first.id, laptop.id, 1)
    store.add_item_to_order(first.id, mouse.id, 2)
    store.update_order_status(first.id, OrderStatus.PAID)

    second = store.create_order(maria.id)
    store.add_item_to_order(second.id, coffee.id, 3)
    store.add_item_to_order(second.id, tea.id, 2)

    _section("Orders created")
    for order in store.list_orders():
        print(order)

    _section("Customers in natural order (name, email, id)")
    for customer in store.list_customers_ordered():
        print(customer)

    _section("Customers sorted by points desc, then name")
    for customer in sort_customers_by_points(store.list_customers()):
        print(customer)

    _section("Products sorted by price desc, then name, then category")
    for product in sort_products_by_price(store.list_products()):
        print(product)

    threshold = settings.EXPENSIVE_PRICE_THRESHOLD
    _section(f"Expensive product names >= {threshold:g}")
    print(AnalyticsService.expensive_product_names(store.list_products(), threshold))

    _section("Average price by category")
    print(AnalyticsService.avg_price_by_category(store.list_products()))

    _section("Total revenue from orders")
    print(f"Total revenue = {AnalyticsService.total_revenue(store.list_orders())}")

    _section("Top customer by points")
    top = AnalyticsService.top_customer(store.list_customers())
    print(top if top is not None else "NO_CUSTOMERS")

    _section("Orders by creation time (created_at -> order id)")
    for created_at, order_id in store.list_orders_by_time():
        print(f"{created_at.isoformat()} -> {order_id}")

    _section(f"Delete product (removes it from orders too): {mouse.name}")
    store.delete_product(mouse.id)
    order = store.read_order(first.id)
    if order is not None:
        print(order)

    return store


def run_benchmark(settings: Settings = default_settings) -> None:
    benchmark = ContainerBenchmark(
        size=settings.BENCHMARK_SIZE,
        probes=settings.BENCHMARK_PROBES,
        warmup_rounds=settings.BENCHMARK_WARMUP_ROUNDS,
        seed=settings.BENCHMARK_SEED,
    )
    print("\n" + "=" * 70)
    print("Container performance experiments")
    print("=" * 70)
    print(ContainerBenchmark.format_report(benchmark.run()))


def main() -> None:
    logging.basicConfig(level=default_settings.LOG_LEVEL, format=default_settings.LOG_FORMAT)
    logger.info(f"Starting {default_settings.APP_NAME} demo")

    run_demo(DataStore())

    if default_settings.BENCHMARK_ENABLED:
        run_benchmark()

    print("\n=== Done ===")


if __name__ == "__main__":
    main()
