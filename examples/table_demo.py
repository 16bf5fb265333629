#!/usr/bin/env python3
"""Demonstration of staging and committing table changes."""

from tablekit import Column, SQLiteAdapter, Table, load_settings, setup_logging
from tablekit.db import create_engine_from_settings


def main() -> None:
    """Create a table, extend it, then alter it in place."""
    settings = load_settings()
    setup_logging(level=settings.log_level)

    engine = create_engine_from_settings(settings)
    adapter = SQLiteAdapter(engine)

    try:
        orders = Table("orders", adapter=adapter)
        if orders.exists():
            orders.drop()

        # Create path: everything goes out in one create call
        orders.add_column("customer_email", "string", limit=320, null=False)
        orders.add_column("total", "decimal", precision=10, scale=2, default=0)
        orders.add_column("created_at", "datetime", default="CURRENT_TIMESTAMP")
        orders.add_index("customer_email")
        orders.save()

        # Update path: one ALTER per staged change
        orders.add_column("status", "string", limit=20, default="new")
        orders.add_index(["status", "created_at"], name="orders_by_status")
        orders.save()

        # Immediate operations
        orders.change_column("status", Column(type="text", default="new"))
        orders.rename("purchase_orders")

        print(f"Table {orders.name} exists: {orders.exists()}")
        print(f"Has status index: {orders.has_index(['status', 'created_at'])}")
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
