"""Static quotes served when the quote upstream is unavailable."""

import random

from app.models import Quote

FALLBACK_QUOTES: tuple[Quote, ...] = (
    Quote(text="The only way to do great work is to love what you do.", author="Steve Jobs"),
    Quote(text="Innovation distinguishes between a leader and a follower.", author="Steve Jobs"),
    Quote(
        text="Success is not final, failure is not fatal: it is the courage to continue that counts.",
        author="Winston Churchill",
    ),
    Quote(
        text="The future belongs to those who believe in the beauty of their dreams.",
        author="Eleanor Roosevelt",
    ),
    Quote(text="It is during our darkest moments that we must focus to see the light.", author="Aristotle"),
    Quote(text="Believe you can and you're halfway there.", author="Theodore Roosevelt"),
    Quote(text="The only impossible journey is the one you never begin.", author="Tony Robbins"),
    Quote(text="Life is 10% what happens to you and 90% how you react to it.", author="Charles R. Swindoll"),
)


def pick_fallback_quote(rng: random.Random | None = None) -> Quote:
    """Return one fallback quote chosen uniformly at random."""
    return (rng or random).choice(FALLBACK_QUOTES)
