"""
Example 02: Stored Procedures

This example demonstrates calling a PostgreSQL function with parameters bound
from an object's fields. Requires the ``postgresql`` extra and a running
server reachable through the DATA_FETCH_PG environment variable.
"""

from data_fetch import ConnectionConfig, DataFetcher, DataFetchError, setup_logging
from pydantic import BaseModel
from dataclasses import dataclass
import os


class Order(BaseModel):
    """Result row of sales.orders_for_customer"""
    order_id: int
    total: float
    note: str = ""


@dataclass
class OrdersQuery:
    """Each field becomes a named procedure parameter"""
    customer_id: int
    status: str


def main():
    setup_logging(json=True)

    config = ConnectionConfig(
        driver="postgresql",
        connection_string=os.environ.get("DATA_FETCH_PG", "host=localhost dbname=shop"),
        options={"connect_timeout": 5},
    )
    fetcher = DataFetcher.from_config(config)

    print("=== Stored Procedures ===\n")

    orders = fetcher.stored_procedure(
        Order,
        "sales.orders_for_customer",
        config.connection_string,
        OrdersQuery(customer_id=42, status="shipped"),
    )
    try:
        for order in orders:
            print(f"  - #{order.order_id}: {order.total:.2f} {order.note}")
    except DataFetchError as exc:
        print(f"Fetch failed: {exc}")


if __name__ == "__main__":
    main()
