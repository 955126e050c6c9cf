import unittest
from decimal import Decimal
from unittest.mock import Mock, patch

from django.contrib import messages

from apps.carts.dtos import CartProduct
from apps.carts.engine import Notice
from apps.carts.notifications import CollectingNotifier, LogNotifier, MessagesNotifier
from apps.carts.pricing import DeliveryRules
from apps.carts.session import CartSession

DAL = CartProduct(id="dal", name="Dal Makhani", price=Decimal("180"))
KEBAB = CartProduct(id="kebab", name="Frozen Seekh Kebab", price=Decimal("250"), is_frozen_food=True)


class CartSessionTests(unittest.TestCase):
    def setUp(self):
        self.notifier = CollectingNotifier()
        self.session = CartSession(notifier=self.notifier)

    def test_sessions_do_not_share_state(self):
        other = CartSession(notifier=CollectingNotifier())
        self.session.add_to_cart(DAL)
        self.assertEqual(other.item_count, 0)
        self.assertEqual(self.session.item_count, 1)

    def test_notices_are_dispatched_after_state_change(self):
        seen = []
        notifier = Mock()
        session = CartSession(notifier=notifier)
        notifier.notify.side_effect = lambda notice: seen.append(session.item_count)
        session.add_to_cart(DAL, 2)
        self.assertEqual(seen, [2])

    def test_operation_messages(self):
        self.session.add_to_cart(DAL)
        self.session.add_to_cart(DAL, 2)
        self.session.update_quantity("dal", 5)
        self.session.remove_from_cart("dal")
        self.session.add_to_cart(KEBAB)
        self.session.clear_cart()
        self.session.clear_cart()
        self.assertEqual(
            [n.message for n in self.notifier.notices],
            [
                "Added Dal Makhani to cart",
                "Added 2 more Dal Makhani to cart",
                "Item removed from cart",
                "Added Frozen Seekh Kebab to cart",
                "Cart cleared",
            ],
        )

    def test_read_only_views(self):
        self.session.add_to_cart(DAL, 2)
        self.session.add_to_cart(KEBAB)
        self.assertEqual(self.session.subtotal, Decimal("610"))
        self.assertEqual(self.session.item_count, 3)
        self.assertEqual([i.product.id for i in self.session.items], ["dal", "kebab"])

    def test_quote_uses_current_cart(self):
        self.session.add_to_cart(KEBAB)
        quote = self.session.quote(DeliveryRules())
        self.assertEqual(quote.delivery_fee, Decimal("70"))
        self.assertEqual(quote.total, Decimal("320"))

    def test_defaults_to_log_notifier(self):
        self.assertIsInstance(CartSession().notifier, LogNotifier)


class NotifierTests(unittest.TestCase):
    def test_log_notifier(self):
        log = Mock()
        LogNotifier(log=log).notify(Notice("info", "Cart cleared"))
        log.info.assert_called_once_with("Cart cleared", level="info")

    def test_messages_notifier_maps_levels(self):
        request = object()
        with patch("apps.carts.notifications.messages.add_message") as add_message:
            notifier = MessagesNotifier(request)
            notifier.notify(Notice("success", "Added Dal Makhani to cart"))
            notifier.notify(Notice("info", "Cart cleared"))
        add_message.assert_any_call(
            request, messages.SUCCESS, "Added Dal Makhani to cart", fail_silently=True
        )
        add_message.assert_any_call(request, messages.INFO, "Cart cleared", fail_silently=True)
