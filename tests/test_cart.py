"""
Tests for the cart normalization engine
"""

import random

import pytest
from solaris.cart import (
    Cart,
    LineItem,
    normalize,
    add_item,
    remove_item,
    increment_item,
    decrement_item,
    clear_auto_bundled,
)
from solaris.cart.catalog import CATALOG, bundle_savings, list_catalog, get_catalog_item

OPERATIONS = [add_item, remove_item, increment_item, decrement_item]
PRODUCT_IDS = ["sg1", "ln1", "bd1"]


class TestCatalog:
    """Tests for the fixed catalog."""

    def test_catalog_order(self):
        """Catalog lists sunglasses, lenses, bundle."""
        assert [p.id for p in list_catalog()] == ["sg1", "ln1", "bd1"]

    def test_bundle_cheaper_than_components(self):
        """Bundle price is strictly below the component sum."""
        assert CATALOG["bd1"].price < CATALOG["sg1"].price + CATALOG["ln1"].price
        assert str(bundle_savings()) == "10.00"

    def test_unknown_product(self):
        assert get_catalog_item("nope") is None


class TestNormalize:
    """Tests for normalize()."""

    def test_converts_pairs(self):
        """Matched pairs become bundles."""
        result, bundled = normalize({"sg1": 3, "ln1": 2, "bd1": 1})
        assert result == {"sg1": 1, "bd1": 3}
        assert bundled is True

    def test_no_pairs(self):
        result, bundled = normalize({"sg1": 2, "bd1": 1})
        assert result == {"sg1": 2, "bd1": 1}
        assert bundled is False

    def test_drops_zero_lines(self):
        result, bundled = normalize({"sg1": 0, "ln1": 1})
        assert result == {"ln1": 1}
        assert bundled is False

    def test_drops_unknown_products(self):
        result, _ = normalize({"zz9": 4, "ln1": 1})
        assert result == {"ln1": 1}

    def test_idempotent(self):
        """Normalizing a normalized mapping changes nothing."""
        first, _ = normalize({"sg1": 5, "ln1": 3, "bd1": 2})
        second, bundled = normalize(first)
        assert second == first
        assert bundled is False

    def test_catalog_order_preserved(self):
        result, _ = normalize({"bd1": 1, "ln1": 2})
        assert list(result) == ["ln1", "bd1"]


class TestOperations:
    """Tests for add/remove/increment/decrement."""

    def test_add_creates_line(self, empty_cart):
        cart = add_item(empty_cart, "sg1")
        assert cart.items == [LineItem("sg1", "Solaris Signature Sunglasses", CATALOG["sg1"].price, 1)]

    def test_add_does_not_mutate_input(self, cart_with_sunglasses):
        add_item(cart_with_sunglasses, "sg1")
        assert cart_with_sunglasses.quantities() == {"sg1": 1}

    def test_add_lenses_auto_bundles(self, cart_with_sunglasses):
        """{A:1} + add(B) -> {C:1} with the flag raised."""
        cart = add_item(cart_with_sunglasses, "ln1")
        assert cart.quantities() == {"bd1": 1}
        assert cart.auto_bundled is True

    def test_add_bundle_directly_no_flag(self, empty_cart):
        """Explicit bundle add does not raise the flag."""
        cart = add_item(empty_cart, "bd1")
        assert cart.quantities() == {"bd1": 1}
        assert cart.auto_bundled is False

    def test_leftover_component(self, build_cart):
        """add(A), add(A), add(B) -> {A:1, C:1}."""
        cart = build_cart("sg1", "sg1", "ln1")
        assert cart.quantities() == {"sg1": 1, "bd1": 1}
        assert cart.auto_bundled is True

    def test_remove_whole_line(self, build_cart):
        cart = remove_item(build_cart("sg1", "sg1", "bd1"), "sg1")
        assert cart.quantities() == {"bd1": 1}

    def test_remove_absent_is_noop(self, cart_with_sunglasses):
        cart = remove_item(cart_with_sunglasses, "ln1")
        assert cart.quantities() == {"sg1": 1}

    def test_increment_existing(self, cart_with_sunglasses):
        cart = increment_item(cart_with_sunglasses, "sg1")
        assert cart.quantities() == {"sg1": 2}

    def test_increment_absent_is_noop(self, cart_with_sunglasses):
        cart = increment_item(cart_with_sunglasses, "ln1")
        assert cart.quantities() == {"sg1": 1}
        assert cart.auto_bundled is False

    def test_decrement_removes_at_zero(self, cart_with_sunglasses):
        cart = decrement_item(cart_with_sunglasses, "sg1")
        assert cart.is_empty
        assert cart.items == []

    def test_decrement_absent_is_noop(self, empty_cart):
        cart = decrement_item(empty_cart, "bd1")
        assert cart.is_empty

    def test_decrement_bundle_does_not_split(self, build_cart):
        cart = decrement_item(build_cart("bd1", "bd1"), "bd1")
        assert cart.quantities() == {"bd1": 1}


class TestAutoBundleFlag:
    """Tests for the auto-bundle notice."""

    def test_flag_sticks_until_cleared(self, build_cart):
        cart = build_cart("sg1", "ln1", "sg1")
        assert cart.auto_bundled is True
        cart = clear_auto_bundled(cart)
        assert cart.auto_bundled is False
        assert cart.quantities() == {"sg1": 1, "bd1": 1}

    def test_flag_raised_again_after_clear(self, build_cart):
        """Each pairing conversion raises the flag, not just the first."""
        cart = clear_auto_bundled(build_cart("sg1", "ln1", "sg1"))
        cart = add_item(cart, "ln1")
        assert cart.quantities() == {"bd1": 2}
        assert cart.auto_bundled is True

    def test_clear_on_unflagged_cart(self, cart_with_sunglasses):
        cart = clear_auto_bundled(cart_with_sunglasses)
        assert cart.auto_bundled is False
        assert cart.quantities() == {"sg1": 1}


class TestInvariants:
    """Invariants that hold after any operation sequence."""

    @pytest.mark.parametrize("seed", range(20))
    def test_random_sequences(self, seed):
        rng = random.Random(seed)
        cart = Cart()
        for _ in range(60):
            operation = rng.choice(OPERATIONS)
            product_id = rng.choice(PRODUCT_IDS)
            before = cart.quantities()
            cart = operation(cart, product_id)
            after = cart.quantities()

            # No unconsolidated pair remains
            assert min(after.get("sg1", 0), after.get("ln1", 0)) == 0
            # No empty or negative lines
            assert all(qty > 0 for qty in after.values())
            # Unique lines in catalog order
            ids = [item.product_id for item in cart.items]
            assert ids == [p for p in PRODUCT_IDS if p in after]
            # Normalized state is a fixed point
            assert normalize(after) == (after, False)

            # Each new bundle consumed exactly one sunglasses and one lenses
            if operation is add_item and product_id in ("sg1", "ln1") and after.get("bd1", 0) > before.get("bd1", 0):
                assert after["bd1"] - before.get("bd1", 0) == 1
                other = "ln1" if product_id == "sg1" else "sg1"
                assert after.get(other, 0) == before[other] - 1


class TestBundledLast:
    """Tests for the per-mutation conversion marker."""

    def test_set_only_by_converting_mutation(self, build_cart):
        cart = build_cart("sg1", "ln1")
        assert cart.bundled_last is True
        cart = add_item(cart, "sg1")
        assert cart.bundled_last is False
        assert cart.auto_bundled is True

    def test_cleared_with_notice(self, build_cart):
        assert clear_auto_bundled(build_cart("sg1", "ln1")).bundled_last is False
