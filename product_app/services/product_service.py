"""
Product Service - translates transport shapes to Product records

Pass-through layer between the API and ProductRepository: no retries,
no caching, failures are forwarded unchanged.
"""
from typing import List

from product_app.domain.product import Product, ProductCreate, ProductUpdate
from product_app.repositories.product_repository import ProductRepository


class ProductService:
    """Service for product CRUD operations"""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def get_all_products(self) -> List[Product]:
        return self.repository.get_all()

    def get_all_products_by_store(self, store: str) -> List[Product]:
        return self.repository.get_all_by_store(store)

    def add_product(self, product_create: ProductCreate) -> int:
        """Persist a new product and return its assigned id"""
        return self.repository.add(product_create.to_model())

    def get_product_by_id(self, product_id: int) -> Product:
        return self.repository.get_by_id(product_id)

    def delete_product_by_id(self, product_id: int) -> None:
        self.repository.delete_by_id(product_id)

    def update_product(self, product_update: ProductUpdate) -> None:
        self.repository.update_by_id(product_update.to_model())
