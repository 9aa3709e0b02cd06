"""
Unit tests for the Customer and Product domain models

These tests validate field validation, identity and natural ordering without a store.
"""
import pytest
from pydantic import ValidationError
from uuid import uuid4

from commerce_store.domain import Customer, Product


class TestCustomerModel:
    """Test Customer validation and identity"""

    def test_fields_are_trimmed(self):
        """Test name and email are stored trimmed"""
        customer = Customer(id=uuid4(), name="  Ann  ", email=" a@x.com ", loyalty_points=10)

        assert customer.name == "Ann"
        assert customer.email == "a@x.com"
        assert customer.loyalty_points == 10

    @pytest.mark.parametrize("name,email", [("", "a@x.com"), ("   ", "a@x.com"), ("Ann", ""), ("Ann", "  ")])
    def test_blank_text_is_rejected(self, name, email):
        """Test blank name or email fails at construction"""
        with pytest.raises(ValidationError):
            Customer(id=uuid4(), name=name, email=email, loyalty_points=0)

    def test_negative_points_rejected_at_construction(self):
        """Test negative loyalty points fail at construction"""
        with pytest.raises(ValidationError):
            Customer(id=uuid4(), name="Ann", email="a@x.com", loyalty_points=-1)

    @pytest.mark.parametrize("points", ["10", True, 2.0])
    def test_points_are_not_coerced(self, points):
        """Test non-int points fail at construction and on assignment"""
        with pytest.raises(ValidationError):
            Customer(id=uuid4(), name="Ann", email="a@x.com", loyalty_points=points)

        customer = Customer(id=uuid4(), name="Ann", email="a@x.com", loyalty_points=5)
        with pytest.raises(ValidationError):
            customer.loyalty_points = points
        assert customer.loyalty_points == 5

    def test_assignment_is_validated(self):
        """Test setters validate and leave the old value on failure"""
        customer = Customer(id=uuid4(), name="Ann", email="a@x.com", loyalty_points=5)

        with pytest.raises(ValidationError):
            customer.name = "   "
        with pytest.raises(ValidationError):
            customer.loyalty_points = -3
        with pytest.raises(ValidationError):
            customer.email = None

        assert customer.name == "Ann"
        assert customer.loyalty_points == 5
        assert customer.email == "a@x.com"

        customer.name = " Anna "
        assert customer.name == "Anna"

    def test_id_is_immutable(self):
        """Test the identifier cannot be reassigned"""
        customer = Customer(id=uuid4(), name="Ann", email="a@x.com")

        with pytest.raises(ValidationError):
            customer.id = uuid4()

    def test_equality_and_hash_use_id_only(self):
        """Test two customers with the same id are equal whatever their fields"""
        shared = uuid4()
        first = Customer(id=shared, name="Ann", email="a@x.com")
        second = Customer(id=shared, name="Bo", email="b@x.com", loyalty_points=9)
        other = Customer(id=uuid4(), name="Ann", email="a@x.com")

        assert first == second
        assert hash(first) == hash(second)
        assert first != other
        assert len({first, second, other}) == 2

    def test_natural_order_name_then_email(self):
        """Test natural ordering is name, then email, case-insensitive"""
        bo = Customer(id=uuid4(), name="bo", email="z@x.com")
        ann_b = Customer(id=uuid4(), name="Ann", email="B@x.com")
        ann_a = Customer(id=uuid4(), name="ann", email="a@x.com")

        assert sorted([bo, ann_b, ann_a]) == [ann_a, ann_b, bo]

    def test_str_and_to_dict(self):
        """Test readable string and JSON-friendly dict"""
        customer = Customer(id=uuid4(), name="Ann", email="a@x.com", loyalty_points=3)

        assert "name='Ann'" in str(customer)
        assert "points=3" in str(customer)
        assert customer.to_dict() == {
            'id': str(customer.id),
            'name': 'Ann',
            'email': 'a@x.com',
            'loyalty_points': 3,
        }


class TestProductModel:
    """Test Product validation and ordering"""

    def test_valid_product(self):
        """Test a product with zero price is accepted"""
        product = Product(id=uuid4(), name=" Pen ", category=" Office ", price=0)

        assert product.name == "Pen"
        assert product.category == "Office"
        assert product.price == 0.0

    def test_negative_price_rejected(self):
        """Test negative price fails at construction and on assignment"""
        with pytest.raises(ValidationError):
            Product(id=uuid4(), name="Pen", category="Office", price=-1)

        product = Product(id=uuid4(), name="Pen", category="Office", price=2.5)
        with pytest.raises(ValidationError):
            product.price = -0.01
        assert product.price == 2.5

    @pytest.mark.parametrize("price", ["1.5", True])
    def test_price_is_not_coerced(self, price):
        """Test string or bool price fails at construction and on assignment"""
        with pytest.raises(ValidationError):
            Product(id=uuid4(), name="Pen", category="Office", price=price)

        product = Product(id=uuid4(), name="Pen", category="Office", price=2.5)
        with pytest.raises(ValidationError):
            product.price = price
        assert product.price == 2.5

    def test_int_price_is_accepted(self):
        """Test a whole-number price needs no float literal"""
        product = Product(id=uuid4(), name="Laptop", category="Electronics", price=32000)

        assert product.price == 32000

    @pytest.mark.parametrize("field", ["name", "category"])
    def test_blank_text_rejected_on_assignment(self, field):
        """Test blank name/category assignment fails"""
        product = Product(id=uuid4(), name="Pen", category="Office", price=1)

        with pytest.raises(ValidationError):
            setattr(product, field, "  ")

    def test_natural_order_name_category_price(self):
        """Test natural ordering is name, category, then price"""
        cheap = Product(id=uuid4(), name="Pen", category="office", price=1)
        pricey = Product(id=uuid4(), name="pen", category="Office", price=5)
        art = Product(id=uuid4(), name="Pen", category="Art", price=9)
        apple = Product(id=uuid4(), name="apple", category="Food", price=100)

        assert sorted([pricey, art, apple, cheap]) == [apple, art, cheap, pricey]

    def test_equality_uses_id_only(self):
        """Test equality ignores mutable fields"""
        product = Product(id=uuid4(), name="Pen", category="Office", price=1)
        same = Product(id=product.id, name="Pencil", category="Art", price=3)

        assert product == same
        assert hash(product) == hash(same)
