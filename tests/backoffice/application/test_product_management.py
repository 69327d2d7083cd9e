"""Application tests for catalogue maintenance and lookup."""

import pytest
from backoffice.product.management import RemoveProduct, UpdateProduct
from backoffice.product.product import find_product_by_name, products
from protean import current_domain
from protean.exceptions import ValidationError


class TestAddProductFlow:
    def test_add_product(self, add_product):
        product_id = add_product(name="Desk Lamp", price=19.99)
        product = products.get_by_id(product_id)
        assert product.name == "Desk Lamp"
        assert product.price == 19.99

    def test_duplicate_name_is_rejected(self, add_product):
        add_product(name="Desk Lamp")
        with pytest.raises(ValidationError) as exc:
            add_product(name=" Desk Lamp ", price=5)
        assert "name" in exc.value.messages


class TestFindByName:
    def test_exact_match(self, add_product):
        product_id = add_product(name="Desk Lamp")
        assert find_product_by_name("Desk Lamp").id == product_id

    def test_surrounding_whitespace_is_ignored(self, add_product):
        add_product(name="Desk Lamp")
        assert find_product_by_name("  Desk Lamp  ") is not None

    def test_partial_name_does_not_match(self, add_product):
        add_product(name="Desk Lamp")
        assert find_product_by_name("Lamp") is None

    def test_blank_query(self, add_product):
        add_product(name="Desk Lamp")
        assert find_product_by_name("") is None
        assert find_product_by_name(None) is None


class TestUpdateAndRemove:
    def test_update_price(self, add_product):
        product_id = add_product(price=19.99)
        current_domain.process(UpdateProduct(product_id=product_id, price=21.5), asynchronous=False)
        assert products.get_by_id(product_id).price == 21.5

    def test_remove_product(self, add_product):
        product_id = add_product()
        assert current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False) is True
        assert products.get_by_id(product_id) is None

    def test_list_is_sorted_by_name(self, add_product):
        add_product(name="Zip Tie", price=1)
        add_product(name="anvil", price=99)
        add_product(name="Desk Lamp", price=19.99)
        assert [product.name for product in products.list()] == ["anvil", "Desk Lamp", "Zip Tie"]
