"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
"""
from product_app.domain.product import Product, ProductCreate, ProductUpdate

__all__ = ['Product', 'ProductCreate', 'ProductUpdate']
