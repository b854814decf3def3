from __future__ import annotations

import pytest

from yeargrid.core.glyphs import is_supported
from yeargrid.core.quotes import QUOTES, quote_for_day


def test_quote_for_day_cycles_through_all_quotes() -> None:
    assert quote_for_day(1) == QUOTES[0]
    assert quote_for_day(len(QUOTES)) == QUOTES[-1]
    assert quote_for_day(len(QUOTES) + 1) == QUOTES[0]


def test_quote_for_day_rejects_day_zero() -> None:
    with pytest.raises(ValueError):
        quote_for_day(0)


def test_every_quote_is_drawable_with_builtin_glyphs() -> None:
    for quote in QUOTES:
        missing = {ch for ch in quote if not is_supported(ch)}
        assert not missing, (quote, missing)
