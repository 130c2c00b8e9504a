"""
Application errors

Repositories raise these, services forward them unchanged and the API
layer maps each kind to an HTTP status.
"""


class ProductAppError(Exception):
    """Base class for product application errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProductNotFoundError(ProductAppError):
    """No product row matches the identifier"""

    def __init__(self, product_id: int):
        super().__init__(f"Product with id {product_id} not found")
        self.product_id = product_id


class StorageError(ProductAppError):
    """Connection, constraint or execution failure in the database"""


class EmptyUpdateError(StorageError):
    """Update request carried no field to change"""

    def __init__(self, product_id: int):
        super().__init__(f"Error while updating product with id {product_id}: no fields to update")
        self.product_id = product_id
