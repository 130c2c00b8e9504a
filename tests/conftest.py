"""
Pytest fixtures and configuration for Product API tests

This file provides shared fixtures that can be used across all test modules.
"""
import pytest
import os
from unittest.mock import MagicMock
from dotenv import load_dotenv

from product_app.core.exceptions import ProductNotFoundError
from product_app.domain.product import Product

# Load environment variables for tests
load_dotenv()


class FakeProductRepository:
    """
    In-memory stand-in for ProductRepository

    Ids are assigned sequentially like a BIGSERIAL column.
    """

    def __init__(self, initial_products=None):
        self.products = [p.model_copy() for p in (initial_products or [])]
        self._next_id = max((p.id for p in self.products), default=0) + 1

    def get_all(self):
        return list(self.products)

    def get_all_by_store(self, store):
        return [p for p in self.products if p.store == store]

    def add(self, product):
        stored = product.model_copy(update={"id": self._next_id})
        self._next_id += 1
        self.products.append(stored)
        return stored.id

    def get_by_id(self, product_id):
        for product in self.products:
            if product.id == product_id:
                return product
        raise ProductNotFoundError(product_id)

    def delete_by_id(self, product_id):
        product = self.get_by_id(product_id)
        self.products.remove(product)

    def update_by_id(self, product):
        current = self.get_by_id(product.id)
        index = self.products.index(current)
        self.products[index] = current.model_copy(update=product.update_fields())


@pytest.fixture
def sample_products():
    """
    Provides the four seeded products
    """
    return [
        Product(id=1, name="AirFryer", price=3000.0, discount=22.0, store="ABC TECH"),
        Product(id=2, name="Ütü", price=1500.0, discount=10.0, store="ABC TECH"),
        Product(id=3, name="Çamaşır Makinesi", price=10000.0, discount=15.0, store="ABC TECH"),
        Product(id=4, name="Lambader", price=2000.0, discount=0.0, store="Dekorasyon Sarayı"),
    ]


@pytest.fixture
def fake_repository(sample_products):
    return FakeProductRepository(sample_products)


@pytest.fixture
def mock_pool():
    """
    Provides a MagicMock pool wired as pool.connection() -> conn -> cursor

    Tests configure mock_pool.cursor (fetchone/fetchall/execute side effects)
    """
    pool = MagicMock()
    conn = MagicMock()
    cursor = MagicMock()
    pool.connection.return_value.__enter__.return_value = conn
    conn.cursor.return_value.__enter__.return_value = cursor
    pool.conn = conn
    pool.cursor = cursor
    return pool


@pytest.fixture(scope="session")
def database_url():
    """
    Provides the database URL for integration tests

    Scope: session (created once per test session)
    """
    url = os.getenv("DATABASE_URL")
    if not url:
        pytest.skip("DATABASE_URL not configured")
    return url
