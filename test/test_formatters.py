#!/usr/bin/env python3
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from relay.formatters import format_columns, format_notification, get_identifier, group_details_by_action
from relay.models import Decorations, Detail, WebhookPayload


def make_detail(action="added", columns=None, hostname="host1", name="pack/Global/[detection/persistence] Unexpected Device Linux"):
    return Detail(
        action=action,
        calendar_time="Mon Jan  1 00:00:00 2024 UTC",
        columns=columns if columns is not None else {},
        decorations=Decorations(host_uuid="uuid-1", hostname=hostname),
        host_identifier="ident-1",
        name=name,
    )


class TestFormatColumns(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(format_columns({}), "")

    def test_priority_fields_first_then_sorted(self):
        columns = {"zeta": "z", "alpha": "a", "user": "root", "path": "/bin/sh"}
        self.assertEqual(
            format_columns(columns),
            "  path: /bin/sh\n  user: root\n  alpha: a\n  zeta: z\n",
        )

    def test_skips_empty_and_zero_values(self):
        columns = {"path": "", "pid": "0", "uid": "0", "mode": "0755"}
        self.assertEqual(format_columns(columns), "  mode: 0755\n")

    def test_skips_noisy_fields(self):
        columns = {"exception_key": "abc", "numerics": "true", "size": "12"}
        self.assertEqual(format_columns(columns), "  size: 12\n")

    def test_priority_order_is_fixed(self):
        columns = {"state": "LISTEN", "remote_port": "443", "local_port": "22", "cmdline": "sshd"}
        self.assertEqual(
            format_columns(columns),
            "  cmdline: sshd\n  local_port: 22\n  remote_port: 443\n  state: LISTEN\n",
        )

    def test_only_noise_yields_empty(self):
        self.assertEqual(format_columns({"a": "", "b": "0"}), "")


class TestIdentifier(unittest.TestCase):
    def test_first_nonempty_in_order(self):
        self.assertEqual(get_identifier({"command": "c", "filename": "f", "path": ""}), "f")
        self.assertEqual(get_identifier({"cmdline": "ls -la"}), "ls -la")

    def test_none(self):
        self.assertEqual(get_identifier({"user": "root"}), "")

    def test_zero_is_a_valid_identifier(self):
        self.assertEqual(get_identifier({"name": "0"}), "0")


class TestGroupDetails(unittest.TestCase):
    def test_preserves_order_within_group(self):
        d1 = make_detail("added", {"path": "/a"})
        d2 = make_detail("removed", {"path": "/b"})
        d3 = make_detail("added", {"path": "/c"})
        grouped = group_details_by_action([d1, d2, d3])
        self.assertEqual(grouped["added"], [d1, d3])
        self.assertEqual(grouped["removed"], [d2])


class TestFormatNotification(unittest.TestCase):
    def test_empty_details(self):
        self.assertIsNone(format_notification(WebhookPayload(timestamp="t", details=[]), "fleet-alerts"))

    def test_single_added_detail(self):
        payload = WebhookPayload(details=[make_detail("added", {"path": "/tmp/x"})])
        n = format_notification(payload, "fleet-alerts")

        self.assertEqual(n.topic, "fleet-alerts")
        self.assertEqual(n.title, "Unexpected Device Linux - host1")
        self.assertEqual(n.priority, 4)
        self.assertEqual(n.tags[:3], ["computer", "warning", "anchor"])
        self.assertEqual(
            n.message,
            "Host: host1\n"
            "Detection: detection/persistence\n"
            "Time: Mon Jan  1 00:00:00 2024 UTC\n"
            "\n"
            "[+ added]\n"
            "• /tmp/x\n"
            "  path: /tmp/x",
        )

    def test_removed_before_added(self):
        payload = WebhookPayload(details=[
            make_detail("added", {"path": "/new"}),
            make_detail("removed", {"path": "/old"}),
        ])
        message = format_notification(payload, "t").message
        self.assertIn("[− removed]", message)
        self.assertLess(message.index("[− removed]"), message.index("[+ added]"))
        self.assertLess(message.index("• /old"), message.index("• /new"))

    def test_hostname_falls_back_to_host_identifier(self):
        payload = WebhookPayload(details=[make_detail(hostname="")])
        n = format_notification(payload, "t")
        self.assertEqual(n.title, "Unexpected Device Linux - ident-1")
        self.assertTrue(n.message.startswith("Host: ident-1\n"))

    def test_header_uses_first_detail_only(self):
        payload = WebhookPayload(details=[
            make_detail("added", {"path": "/a"}, hostname="first", name="pack/[c2] Beacon"),
            make_detail("added", {"path": "/b"}, hostname="second", name="pack/[network] Other"),
        ])
        n = format_notification(payload, "t")
        self.assertEqual(n.title, "Beacon - first")
        self.assertEqual(n.priority, 5)
        self.assertNotIn("second", n.message)

    def test_other_actions_are_not_rendered(self):
        payload = WebhookPayload(details=[
            make_detail("snapshot", {"path": "/snap"}),
        ])
        n = format_notification(payload, "t")
        self.assertIsNotNone(n)
        self.assertNotIn("/snap", n.message)
        self.assertTrue(n.message.endswith("Time: Mon Jan  1 00:00:00 2024 UTC"))

    def test_detail_without_identifier(self):
        payload = WebhookPayload(details=[make_detail("removed", {"port": "22"})])
        message = format_notification(payload, "t").message
        self.assertNotIn("•", message)
        self.assertTrue(message.endswith("[− removed]\n  port: 22"))

    def test_fallback_category(self):
        payload = WebhookPayload(details=[make_detail(name="pack/Global/usb_devices")])
        n = format_notification(payload, "t")
        self.assertEqual(n.title, "usb_devices - host1")
        self.assertIn("Detection: alert\n", n.message)
        self.assertEqual(n.priority, 3)
        self.assertEqual(n.tags, ["computer", "mag"])


if __name__ == '__main__':
    unittest.main()
