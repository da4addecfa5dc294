import random
import unittest

from app.fallback_quotes import FALLBACK_QUOTES, pick_fallback_quote
from app.models import Quote


class TestFallbackQuotes(unittest.TestCase):
    def test_store_has_eight_non_empty_quotes(self):
        self.assertIsInstance(FALLBACK_QUOTES, tuple)
        self.assertEqual(len(FALLBACK_QUOTES), 8)
        for quote in FALLBACK_QUOTES:
            self.assertTrue(quote.text)
            self.assertTrue(quote.author)
        self.assertEqual(FALLBACK_QUOTES[0].author, "Steve Jobs")
        self.assertEqual(FALLBACK_QUOTES[-1].author, "Charles R. Swindoll")

    def test_quotes_are_immutable(self):
        with self.assertRaises(Exception):
            FALLBACK_QUOTES[0].text = "changed"

    def test_pick_returns_member(self):
        for _ in range(50):
            self.assertIn(pick_fallback_quote(), FALLBACK_QUOTES)

    def test_pick_covers_every_entry(self):
        rng = random.Random(1234)
        seen = {pick_fallback_quote(rng) for _ in range(500)}
        self.assertEqual(seen, set(FALLBACK_QUOTES))

    def test_pick_is_a_quote(self):
        self.assertIsInstance(pick_fallback_quote(random.Random(0)), Quote)


if __name__ == "__main__":
    unittest.main()
