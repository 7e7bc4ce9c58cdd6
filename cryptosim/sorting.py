"""In-place orderings of a crypto list."""

from __future__ import annotations


def insertion_sort_by_name(cryptos, ascending=True):
    """Sort by name in place, keeping equal names in their original order."""
    cryptos.sort(key=lambda crypto: crypto.name, reverse=not ascending)


def _selection_sort(cryptos, pick):
    for start in range(len(cryptos) - 1):
        chosen = pick(range(start, len(cryptos)), key=lambda k: _key(cryptos, k))
        cryptos[start], cryptos[chosen] = cryptos[chosen], cryptos[start]


def _key(cryptos, index):
    return _current_attr(cryptos[index])


_current_attr = None


def selection_sort_by_price(cryptos):
    """Sort by price ascending with a selection sort (not stable)."""
    for start in range(len(cryptos) - 1):
        chosen = min(range(start, len(cryptos)), key=lambda k: cryptos[k].price)
        cryptos[start], cryptos[chosen] = cryptos[chosen], cryptos[start]


def selection_sort_by_market_cap(cryptos):
    """Sort by market cap descending with a selection sort (not stable)."""
    for start in range(len(cryptos) - 1):
        chosen = max(range(start, len(cryptos)), key=lambda k: cryptos[k].market_cap)
        cryptos[start], cryptos[chosen] = cryptos[chosen], cryptos[start]