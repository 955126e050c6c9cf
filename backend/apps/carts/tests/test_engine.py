import unittest
from decimal import Decimal

from apps.carts import engine
from apps.carts.commands import AddToCart, ClearCart, RemoveFromCart, UpdateQuantity
from apps.carts.dtos import Cart, CartProduct


def make_product(pid="p1", name="Chicken Biryani", price="12.50", frozen=False):
    return CartProduct(id=pid, name=name, price=Decimal(price), is_frozen_food=frozen)


BIRYANI = make_product()
SAMOSA = make_product("p2", "Frozen Samosa", "3.20", frozen=True)
LASSI = make_product("p3", "Mango Lassi", "0.10")


def totals_hold(cart: Cart) -> bool:
    subtotal = sum((i.product.price * i.quantity for i in cart.items), Decimal("0"))
    count = sum(i.quantity for i in cart.items)
    return cart.subtotal == subtotal and cart.item_count == count


class AddToCartTests(unittest.TestCase):
    def test_insert_new_line(self):
        result = engine.add_to_cart(Cart(), BIRYANI, 2)
        self.assertEqual(len(result.cart.items), 1)
        self.assertEqual(result.cart.items[0].quantity, 2)
        self.assertEqual(result.notices, (engine.Notice("success", "Added Chicken Biryani to cart"),))

    def test_merge_never_duplicates(self):
        cart = engine.add_to_cart(Cart(), BIRYANI, 2).cart
        result = engine.add_to_cart(cart, BIRYANI, 3)
        self.assertEqual(len(result.cart.items), 1)
        self.assertEqual(result.cart.get("p1").quantity, 5)
        self.assertEqual(result.notices[0].message, "Added 3 more Chicken Biryani to cart")

    def test_merge_keeps_line_order(self):
        cart = engine.add_to_cart(Cart(), BIRYANI).cart
        cart = engine.add_to_cart(cart, SAMOSA).cart
        cart = engine.add_to_cart(cart, BIRYANI).cart
        self.assertEqual([i.product.id for i in cart.items], ["p1", "p2"])

    def test_default_quantity_is_one(self):
        self.assertEqual(engine.add_to_cart(Cart(), SAMOSA).cart.item_count, 1)

    def test_non_positive_quantity_is_ignored(self):
        cart = engine.add_to_cart(Cart(), BIRYANI).cart
        for qty in (0, -3):
            result = engine.add_to_cart(cart, BIRYANI, qty)
            self.assertEqual(result.cart, cart)
            self.assertEqual(result.notices, ())

    def test_input_cart_is_not_mutated(self):
        cart = engine.add_to_cart(Cart(), BIRYANI).cart
        engine.add_to_cart(cart, BIRYANI, 4)
        self.assertEqual(cart.get("p1").quantity, 1)


class RemoveAndUpdateTests(unittest.TestCase):
    def setUp(self):
        cart = engine.add_to_cart(Cart(), BIRYANI, 2).cart
        self.cart = engine.add_to_cart(cart, SAMOSA, 1).cart

    def test_remove_line(self):
        result = engine.remove_from_cart(self.cart, "p1")
        self.assertIsNone(result.cart.get("p1"))
        self.assertEqual(result.notices, (engine.Notice("info", "Item removed from cart"),))

    def test_remove_absent_is_silent(self):
        result = engine.remove_from_cart(self.cart, "nope")
        self.assertEqual(result.cart, self.cart)
        self.assertEqual(result.notices, ())

    def test_update_quantity_sets_value(self):
        result = engine.update_quantity(self.cart, "p2", 7)
        self.assertEqual(result.cart.get("p2").quantity, 7)
        self.assertEqual(result.notices, ())

    def test_update_below_one_leaves_cart_unchanged(self):
        for qty in (0, -1):
            self.assertEqual(engine.update_quantity(self.cart, "p1", qty).cart, self.cart)
        # zero never removes the line
        self.assertIsNotNone(engine.update_quantity(self.cart, "p1", 0).cart.get("p1"))

    def test_update_unknown_product(self):
        self.assertEqual(engine.update_quantity(self.cart, "ghost", 3).cart, self.cart)


class ClearCartTests(unittest.TestCase):
    def test_clear_non_empty(self):
        cart = engine.add_to_cart(Cart(), BIRYANI, 2).cart
        result = engine.clear_cart(cart)
        self.assertTrue(result.cart.is_empty)
        self.assertEqual(result.cart.subtotal, Decimal("0"))
        self.assertEqual(result.cart.item_count, 0)
        self.assertEqual(result.notices[0].message, "Cart cleared")

    def test_clear_empty_is_noop(self):
        empty = Cart()
        result = engine.clear_cart(empty)
        self.assertEqual(result.cart, empty)
        self.assertEqual(result.notices, ())


class TotalsTests(unittest.TestCase):
    def test_totals_hold_after_mixed_sequence(self):
        commands = [
            AddToCart(BIRYANI, 2),
            AddToCart(LASSI, 3),
            AddToCart(SAMOSA, 1),
            AddToCart(LASSI, 7),
            UpdateQuantity("p1", 4),
            UpdateQuantity("p2", 0),
            RemoveFromCart("p2"),
            AddToCart(SAMOSA, 2),
        ]
        cart = Cart()
        for command in commands:
            cart = engine.apply(cart, command).cart
            self.assertTrue(totals_hold(cart))
        self.assertEqual(cart.item_count, 4 + 10 + 2)
        # decimals keep cents exact: 10 x 0.10 is exactly 1.00
        self.assertEqual(cart.subtotal, Decimal("50.00") + Decimal("1.00") + Decimal("6.40"))

    def test_apply_dispatches_clear(self):
        cart = engine.apply(Cart(), AddToCart(BIRYANI)).cart
        self.assertTrue(engine.apply(cart, ClearCart()).cart.is_empty)

    def test_apply_rejects_unknown_command(self):
        with self.assertRaises(TypeError):
            engine.apply(Cart(), object())

    def test_has_frozen_food(self):
        self.assertFalse(engine.add_to_cart(Cart(), BIRYANI).cart.has_frozen_food)
        self.assertTrue(engine.add_to_cart(Cart(), SAMOSA).cart.has_frozen_food)
