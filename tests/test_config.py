import os
import unittest

from app.config import Settings

_ENV_KEYS = ("PORT", "OPENWEATHER_API_KEY", "QUOTE_URL", "UPSTREAM_TIMEOUT_SECONDS")


class TestConfig(unittest.TestCase):
    def setUp(self):
        self._saved = {key: os.environ.pop(key, None) for key in _ENV_KEYS}

    def tearDown(self):
        for key, value in self._saved.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value

    def test_settings_defaults(self):
        s = Settings(_env_file=None)
        self.assertEqual(s.port, 3001)
        self.assertIsNone(s.openweather_api_key)
        self.assertEqual(s.exchange_rate_url, "https://api.exchangerate-api.com/v4/latest/INR")
        self.assertEqual(s.quote_url, "https://api.quotable.io/random")
        self.assertEqual(s.upstream_timeout_seconds, 10.0)
        self.assertEqual(s.cors_origins, ["*"])

    def test_settings_env_override(self):
        os.environ["PORT"] = "8080"
        os.environ["OPENWEATHER_API_KEY"] = "abc123"
        os.environ["UPSTREAM_TIMEOUT_SECONDS"] = "2.5"
        s = Settings(_env_file=None)
        self.assertEqual(s.port, 8080)
        self.assertEqual(s.openweather_api_key, "abc123")
        self.assertEqual(s.upstream_timeout_seconds, 2.5)

    def test_blank_api_key_is_missing(self):
        os.environ["OPENWEATHER_API_KEY"] = "   "
        s = Settings(_env_file=None)
        self.assertIsNone(s.openweather_api_key)

    def test_trailing_slash_stripped(self):
        os.environ["QUOTE_URL"] = "http://quotes.test/random/"
        s = Settings(_env_file=None)
        self.assertEqual(s.quote_url, "http://quotes.test/random")


if __name__ == "__main__":
    unittest.main()
