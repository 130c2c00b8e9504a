"""
Product Domain Model

Represents a product row of the products table.
This is the single source of truth for product data structure.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional

# Columns an UPDATE may set, in statement order
UPDATABLE_COLUMNS = ("name", "price", "discount", "store")


class Product(BaseModel):
    """
    Product domain model - one row of the products table

    Fields:
        id: Store-assigned identifier (None until persisted)
        name: Product name
        price: Price (non-negative expected, not validated)
        discount: Discount
        store: Store name, used to group products
    """

    id: Optional[int] = Field(None, description="Store-assigned product ID")
    name: str = Field("", description="Product name")
    price: float = Field(0.0, description="Product price")
    discount: float = Field(0.0, description="Product discount")
    store: str = Field("", description="Store the product belongs to")

    model_config = ConfigDict(from_attributes=True)

    def update_fields(self) -> dict:
        """
        Columns an update of this product would overwrite, in column order

        A field left at its zero value ("" or 0) counts as not provided,
        so an update can't set price or discount to 0.
        """
        fields = {}
        for column in UPDATABLE_COLUMNS:
            value = getattr(self, column)
            if value:
                fields[column] = value
        return fields


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    name: str = ""
    price: float = 0.0
    discount: float = 0.0
    store: str = ""

    def to_model(self) -> Product:
        return Product(
            name=self.name,
            price=self.price,
            discount=self.discount,
            store=self.store,
        )


class ProductUpdate(BaseModel):
    """Schema for updating an existing product"""
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    id: int = 0
    name: str = ""
    price: float = 0.0
    discount: float = 0.0
    store: str = ""

    def to_model(self) -> Product:
        return Product(
            id=self.id,
            name=self.name,
            price=self.price,
            discount=self.discount,
            store=self.store,
        )
