import logging
import unittest

from apps.common.logger import AppLogger, get_logger


class AppLoggerTests(unittest.TestCase):
    def test_bind_merges_context_without_mutating_parent(self):
        base = get_logger("apps.tests.logger").bind(component="auth")
        child = base.bind(view="LoginView")
        self.assertEqual(base.context, {"component": "auth"})
        self.assertEqual(child.context, {"component": "auth", "view": "LoginView"})

    def test_format_appends_context_pairs(self):
        line = AppLogger._format("Login rejected", {"username": "chef1", "role": "kitchen"})
        self.assertEqual(line, "Login rejected | username=chef1 role=kitchen")

    def test_sensitive_values_are_redacted(self):
        line = AppLogger._format(
            "Session issued", {"user_id": 3, "token": "eyJ.abc.def", "password": "pw"}
        )
        self.assertNotIn("eyJ.abc.def", line)
        self.assertNotIn("=pw", line)
        self.assertIn("token=***", line)
        self.assertIn("user_id=3", line)

    def test_messages_reach_stdlib_logger(self):
        log = get_logger("apps.tests.logger").bind(component="carts")
        with self.assertLogs("apps.tests.logger", level=logging.INFO) as captured:
            log.info("Cart cleared", items=2)
        self.assertEqual(captured.output, ["INFO:apps.tests.logger:Cart cleared | component=carts items=2"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
