from collections import namedtuple

import pandas as pd


def _unique(items):
    # set semantics, but keep first-seen order so reports read the same every run
    seen = set()
    out = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


class SymbolMismatch(AssertionError):
    def __init__(self, result):
        self.result = result
        super().__init__(result.failure_message())


class SymbolDiff(namedtuple("SymbolDiff", ["extra", "missing"])):
    """extra = on the page but not expected, missing = expected but not on the page."""
    __slots__ = ()

    @property
    def matches(self):
        return not self.extra and not self.missing

    def failure_message(self):
        return (f"Unexpected extra symbols found: {list(self.extra)} | "
                f"Missing expected symbols: {list(self.missing)}")


def diff_symbols(expected, actual):
    expected_set = set(expected)
    actual_set = set(actual)
    extra = [s for s in _unique(actual) if s not in expected_set]
    missing = [s for s in _unique(expected) if s not in actual_set]
    return SymbolDiff(extra, missing)


def assert_symbols_match(expected, actual):
    result = diff_symbols(expected, actual)
    if not result.matches:
        raise SymbolMismatch(result)
    return result


def comparison_table(expected, actual):
    """One row per distinct symbol with where it was seen."""
    expected_set = set(expected)
    actual_set = set(actual)
    symbols = _unique(list(expected) + list(actual))
    return pd.DataFrame({
        "symbol": symbols,
        "expected": [s in expected_set for s in symbols],
        "on_page": [s in actual_set for s in symbols],
    }, columns=["symbol", "expected", "on_page"])
