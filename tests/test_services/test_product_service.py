"""
Unit tests for ProductService, backed by the in-memory FakeProductRepository
"""
import pytest

from product_app.core.exceptions import ProductNotFoundError, StorageError
from product_app.domain.product import Product, ProductCreate, ProductUpdate
from product_app.services.product_service import ProductService


@pytest.fixture
def service(fake_repository):
    return ProductService(fake_repository)


class TestProductService:

    def test_get_all_products(self, service, sample_products):
        assert service.get_all_products() == sample_products

    def test_get_all_products_by_store_is_ordered_subset(self, service):
        """Test the store filter keeps the order of get_all_products"""
        expected = [p for p in service.get_all_products() if p.store == 'ABC TECH']

        by_store = service.get_all_products_by_store('ABC TECH')

        assert by_store == expected
        assert [p.id for p in by_store] == [1, 2, 3]

    def test_get_all_products_by_unknown_store_is_empty(self, service):
        assert service.get_all_products_by_store('RBD') == []

    def test_add_product_then_get_by_new_id(self, service):
        new_id = service.add_product(ProductCreate(name='Kupa', price=100.0, discount=0.0, store='RBD'))

        stored = service.get_product_by_id(new_id)

        assert new_id == 5
        assert stored == Product(id=5, name='Kupa', price=100.0, discount=0.0, store='RBD')

    def test_get_product_by_id_not_found(self, service):
        with pytest.raises(ProductNotFoundError):
            service.get_product_by_id(99)

    def test_delete_product_then_get_fails(self, service):
        service.delete_product_by_id(4)

        with pytest.raises(ProductNotFoundError):
            service.get_product_by_id(4)
        assert len(service.get_all_products()) == 3

    def test_delete_unknown_product_not_found(self, service):
        with pytest.raises(ProductNotFoundError):
            service.delete_product_by_id(99)

    def test_update_product_changes_only_name(self, service):
        service.update_product(ProductUpdate(id=1, name='Fırın'))

        assert service.get_product_by_id(1) == Product(
            id=1, name='Fırın', price=3000.0, discount=22.0, store='ABC TECH'
        )

    def test_update_product_all_fields(self, service):
        service.update_product(
            ProductUpdate(id=1, name='Fırın', price=4000.0, discount=22.0, store='ABC TECH')
        )

        updated = service.get_product_by_id(1)
        assert (updated.name, updated.price, updated.discount, updated.store) == (
            'Fırın', 4000.0, 22.0, 'ABC TECH'
        )

    def test_failures_are_forwarded_unchanged(self, fake_repository):
        error = StorageError('Error while adding product: boom')

        def failing_add(product):
            raise error

        fake_repository.add = failing_add
        service = ProductService(fake_repository)

        with pytest.raises(StorageError) as exc_info:
            service.add_product(ProductCreate(name='Kupa'))
        assert exc_info.value is error


class TestTransportShapes:

    def test_create_shape_has_no_identifier(self):
        product = ProductCreate(name='Kupa', price=100.0, store='RBD').to_model()

        assert product.id is None
        assert product.discount == 0.0

    def test_update_shape_keeps_identifier(self):
        product = ProductUpdate(id=3, store='RBD').to_model()

        assert product.id == 3
        assert product.update_fields() == {'store': 'RBD'}
