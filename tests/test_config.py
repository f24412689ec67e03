from __future__ import annotations

import os
import unittest
from unittest.mock import patch

from config import AppSettings, parse_duration, parse_listen
from translator.base import TranslationRequest


class TestDuration(unittest.TestCase):
    def test_go_style_durations(self):
        self.assertEqual(parse_duration("1m"), 60.0)
        self.assertEqual(parse_duration("90s"), 90.0)
        self.assertEqual(parse_duration("1h30m"), 5400.0)
        self.assertAlmostEqual(parse_duration("250ms"), 0.25)

    def test_plain_seconds(self):
        self.assertEqual(parse_duration("15"), 15.0)
        self.assertEqual(parse_duration(2), 2.0)

    def test_invalid(self):
        for value in ("", "soon", "1x", "m1"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    parse_duration(value)


class TestListen(unittest.TestCase):
    def test_port_only(self):
        self.assertEqual(parse_listen(":8888"), ("0.0.0.0", 8888))

    def test_host_and_port(self):
        self.assertEqual(parse_listen("127.0.0.1:9000"), ("127.0.0.1", 9000))

    def test_invalid(self):
        with self.assertRaises(ValueError):
            parse_listen("localhost")


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = AppSettings()
        self.assertEqual(settings.redis_url, "redis://redis/1")
        self.assertEqual(settings.engine.command, "/usr/bin/trans")
        self.assertEqual(settings.listen, ":8888")
        self.assertEqual(settings.notifications.interval, 60.0)
        self.assertIsNone(settings.notifications.tg_token)
        self.assertIsNone(settings.engine.timeout)

    def test_environment(self):
        env = {"TG_CHAT_ID": "-100123", "NOTIFICATION_INTERVAL": "30s", "ENGINE_TIMEOUT": "5s"}
        with patch.dict(os.environ, env, clear=True):
            settings = AppSettings()
        self.assertEqual(settings.notifications.tg_chat_id, -100123)
        self.assertEqual(settings.notifications.interval, 30.0)
        self.assertEqual(settings.engine.timeout, 5.0)


class TestRequest(unittest.TestCase):
    def test_normalization(self):
        request = TranslationRequest.from_raw("  House ", " DE")
        self.assertEqual((request.word, request.target_lang), ("house", "de"))
        self.assertTrue(request.is_valid)

    def test_blank_is_invalid(self):
        self.assertFalse(TranslationRequest.from_raw(" ", "de").is_valid)
        self.assertFalse(TranslationRequest.from_raw("house", "").is_valid)

    def test_leading_dash_is_invalid(self):
        self.assertFalse(TranslationRequest.from_raw("-h", "de").is_valid)
        self.assertFalse(TranslationRequest.from_raw(" --help", "de").is_valid)
        self.assertTrue(TranslationRequest.from_raw("well-known", "de").is_valid)


if __name__ == "__main__":
    unittest.main()
