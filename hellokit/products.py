"""A small product table kept in SQLite with soft deletion."""

import argparse
import os
import sqlite3
import sys
from dataclasses import dataclass, replace
from datetime import datetime

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS products ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "created_at DATETIME, updated_at DATETIME, deleted_at DATETIME, "
    "code VARCHAR(255), price INTEGER)",
    "CREATE INDEX IF NOT EXISTS idx_products_deleted_at ON products(deleted_at)",
)
_COLUMNS = "id, created_at, updated_at, deleted_at, code, price"


@dataclass
class Product:
    id: int
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None
    code: str
    price: int


def _parse(value):
    return datetime.fromisoformat(value) if value else None


def _row_to_product(row) -> Product:
    return Product(
        id=row[0],
        created_at=_parse(row[1]),
        updated_at=_parse(row[2]),
        deleted_at=_parse(row[3]),
        code=row[4],
        price=row[5],
    )


def _check_price(price: int) -> None:
    if price < 0:
        raise ValueError(f"price must not be negative, got {price}")


class ProductStore:
    """Products in an SQLite file; deleted products are hidden, not removed."""

    def __init__(self, path):
        self._conn = sqlite3.connect(os.fspath(path))
        with self._conn:
            for statement in _SCHEMA:
                self._conn.execute(statement)

    def create(self, code: str, price: int) -> Product:
        _check_price(price)
        now = datetime.now()
        with self._conn:
            cursor = self._conn.execute(
                "INSERT INTO products (created_at, updated_at, deleted_at, code, price) "
                "VALUES (?, ?, NULL, ?, ?)",
                (now.isoformat(), now.isoformat(), code, price),
            )
        return Product(cursor.lastrowid, now, now, None, code, price)

    def _first(self, where: str, params) -> Product | None:
        row = self._conn.execute(
            f"SELECT {_COLUMNS} FROM products WHERE {where} AND deleted_at IS NULL "
            "ORDER BY id LIMIT 1",
            params,
        ).fetchone()
        return _row_to_product(row) if row is not None else None

    def first(self, product_id: int) -> Product | None:
        """Return the live product with this id, or None."""
        return self._first("id = ?", (product_id,))

    def first_by_code(self, code: str) -> Product | None:
        """Return the first live product with this code, or None."""
        return self._first("code = ?", (code,))

    def update_price(self, product: Product, price: int) -> Product:
        """Set the product's price and return the updated product."""
        if not product.id:
            raise ValueError("product has no primary key")
        _check_price(price)
        now = datetime.now()
        with self._conn:
            self._conn.execute(
                "UPDATE products SET price = ?, updated_at = ? WHERE id = ? AND deleted_at IS NULL",
                (price, now.isoformat(), product.id),
            )
        return replace(product, price=price, updated_at=now)

    def delete(self, product: Product) -> bool:
        """Mark the product deleted; return False if it was not live."""
        if not product.id:
            raise ValueError("product has no primary key")
        with self._conn:
            cursor = self._conn.execute(
                "UPDATE products SET deleted_at = ? WHERE id = ? AND deleted_at IS NULL",
                (datetime.now().isoformat(), product.id),
            )
        return cursor.rowcount == 1

    def close(self) -> None:
        self._conn.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Exercise the product table.")
    parser.add_argument("database", nargs="?", default="test.db")
    args = parser.parse_args(argv)
    try:
        store = ProductStore(args.database)
    except sqlite3.Error as exc:
        print(f"failed to connect database: {exc}", file=sys.stderr)
        return 1
    with store:
        store.create("L1212", 1000)
        store.create("ABC", 1001)
        product = store.first(1)
        print(f"product={product}")
        found = store.first_by_code("L123")
        if found is not None:
            product = found
        print(f"product={product}")
        if product is not None:
            product = store.update_price(product, 2000)
            found = store.first_by_code("L123")
            if found is not None:
                product = found
            print(f"product={product}")
            store.delete(product)
    return 0


if __name__ == "__main__":
    sys.exit(main())