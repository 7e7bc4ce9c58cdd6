"""Lookups of cryptos by exact name."""

from __future__ import annotations


def sequential_search(cryptos, name):
    """Every crypto whose name equals ``name``, in list order."""
    return [crypto for crypto in cryptos if crypto.name == name]


def binary_search(cryptos, name):
    """Find a crypto by name in a list sorted ascending by name, or None."""
    low, high = 0, len(cryptos) - 1
    while low <= high:
        mid = (low + high) // 2
        current = cryptos[mid].name
        if current == name:
            return cryptos[mid]
        if current < name:
            low = mid + 1
        else:
            high = mid - 1
    return None