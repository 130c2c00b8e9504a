"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.
Every value goes through a bound parameter; only the UPDATE statement
concatenates column names, taken from Product.update_fields().
"""
import logging
from typing import Any, Dict, List, Tuple

from psycopg2.extras import RealDictCursor
from pydantic import ValidationError

from product_app.core.database import DatabasePool, DATABASE_ERRORS
from product_app.core.exceptions import (
    EmptyUpdateError,
    ProductNotFoundError,
    StorageError,
)
from product_app.domain.product import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    def __init__(self, pool: DatabasePool):
        self._pool = pool

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Helper method to map database row to Product domain model"""
        return Product(
            id=row['id'],
            name=row['name'],
            price=row['price'],
            discount=row['discount'],
            store=row['store'],
        )

    @staticmethod
    def _build_update_statement(product_id: int, fields: Dict[str, Any]) -> Tuple[str, list]:
        """
        Build the partial UPDATE statement for the given columns

        Args:
            product_id: Product to update
            fields: Ordered mapping of column -> new value

        Returns:
            Tuple of (sql, params)
        """
        if not fields:
            raise EmptyUpdateError(product_id)

        set_clause = ", ".join(f"{column} = %s" for column in fields)
        params = list(fields.values()) + [product_id]

        return f"UPDATE products SET {set_clause} WHERE id = %s", params

    def _fetch_all(self, sql: str, params: tuple = ()) -> List[Product]:
        """Run a read-all query; errors are logged and yield an empty list"""
        try:
            with self._pool.connection() as conn:
                with conn.cursor(cursor_factory=RealDictCursor) as cursor:
                    cursor.execute(sql, params)
                    rows = cursor.fetchall()
        except DATABASE_ERRORS as e:
            logger.error(f"Error while fetching products: {e}")
            return []

        try:
            products = [self._map_row_to_product(row) for row in rows]
        except ValidationError as e:
            logger.error(f"Error while scanning product: {e}")
            return []

        logger.info(f"Products fetched: {len(products)}")
        return products

    def get_all(self) -> List[Product]:
        """
        Get every product

        Returns:
            List of products in storage order (empty on query error)
        """
        return self._fetch_all("""
            SELECT id, name, price, discount, store
            FROM products
        """)

    def get_all_by_store(self, store: str) -> List[Product]:
        """
        Get every product of a store (exact name match)

        Returns:
            List of products in storage order (empty on query error)
        """
        return self._fetch_all("""
            SELECT id, name, price, discount, store
            FROM products
            WHERE store = %s
        """, (store,))

    def add(self, product: Product) -> int:
        """
        Insert a new product; the database assigns the id

        Returns:
            The new product id

        Raises:
            StorageError if the insert is rejected
        """
        try:
            with self._pool.connection() as conn:
                with conn.cursor(cursor_factory=RealDictCursor) as cursor:
                    cursor.execute("""
                        INSERT INTO products (name, price, discount, store)
                        VALUES (%s, %s, %s, %s)
                        RETURNING id
                    """, (product.name, product.price, product.discount, product.store))
                    product_id = cursor.fetchone()['id']
        except DATABASE_ERRORS as e:
            logger.error(f"Error while adding product: {e}")
            raise StorageError(f"Error while adding product: {e}") from e

        logger.info(f"Product added with id: {product_id}")
        return product_id

    def get_by_id(self, product_id: int) -> Product:
        """
        Find product by ID

        Raises:
            ProductNotFoundError if no row matches
            StorageError for any other read failure
        """
        try:
            with self._pool.connection() as conn:
                with conn.cursor(cursor_factory=RealDictCursor) as cursor:
                    cursor.execute("""
                        SELECT id, name, price, discount, store
                        FROM products
                        WHERE id = %s
                    """, (product_id,))
                    row = cursor.fetchone()
        except DATABASE_ERRORS as e:
            logger.error(f"Error while fetching product: {e}")
            raise StorageError(f"Error while getting product with id {product_id}") from e

        if not row:
            raise ProductNotFoundError(product_id)

        try:
            product = self._map_row_to_product(row)
        except ValidationError as e:
            logger.error(f"Error while scanning product: {e}")
            raise StorageError(f"Error while getting product with id {product_id}") from e

        logger.info(f"Product fetched with id: {product_id}")
        return product

    def delete_by_id(self, product_id: int) -> None:
        """
        Delete a product after checking it exists

        Raises:
            ProductNotFoundError if the product doesn't exist
            StorageError if the delete fails
        """
        self._check_product_exists(product_id)

        try:
            with self._pool.connection() as conn:
                with conn.cursor() as cursor:
                    cursor.execute("DELETE FROM products WHERE id = %s", (product_id,))
        except DATABASE_ERRORS as e:
            logger.error(f"Error while deleting product: {e}")
            raise StorageError(f"Error while deleting product with id {product_id}") from e

        logger.info(f"Product deleted with id: {product_id}")

    def update_by_id(self, product: Product) -> None:
        """
        Overwrite the non-empty fields of an existing product

        Args:
            product: Product carrying the id and the new values; fields at
                their zero value are left unchanged

        Raises:
            ProductNotFoundError if the product doesn't exist
            EmptyUpdateError if no field carries a value
            StorageError if the update fails
        """
        self._check_product_exists(product.id)

        sql, params = self._build_update_statement(product.id, product.update_fields())

        try:
            with self._pool.connection() as conn:
                with conn.cursor() as cursor:
                    cursor.execute(sql, params)
        except DATABASE_ERRORS as e:
            logger.error(f"Error while updating product: {e}")
            raise StorageError(f"Error while updating product with id {product.id}") from e

        logger.info(f"Product updated with id: {product.id}")

    def _check_product_exists(self, product_id: int) -> None:
        try:
            self.get_by_id(product_id)
        except ProductNotFoundError as e:
            logger.error(f"Error while checking product: {e}")
            raise
