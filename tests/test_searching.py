import pytest

from cryptosim.models import Crypto, default_simulator
from cryptosim.searching import binary_search, sequential_search
from cryptosim.sorting import insertion_sort_by_name


def test_sequential_search_finds_all_matches():
    items = [
        Crypto("Bitcoin", "BTC", 1, 1),
        Crypto("Ethereum", "ETH", 1, 1),
        Crypto("Bitcoin", "XBT", 1, 1),
    ]
    found = sequential_search(items, "Bitcoin")
    assert [c.symbol for c in found] == ["BTC", "XBT"]


def test_sequential_search_missing_is_empty():
    sim = default_simulator()
    assert sequential_search(sim.cryptos, "bitcoin") == []


@pytest.mark.parametrize("name", ["Bitcoin", "Ethereum", "Cardano"])
def test_binary_search_finds_each(name):
    cryptos = default_simulator().cryptos
    insertion_sort_by_name(cryptos, True)
    found = binary_search(cryptos, name)
    assert found.name == name


def test_binary_search_agrees_with_sequential():
    cryptos = [Crypto(n, n[:3], 1, 1) for n in ["Zcash", "Aave", "Monero", "Litecoin", "Tron"]]
    insertion_sort_by_name(cryptos, True)
    for crypto in cryptos:
        assert binary_search(cryptos, crypto.name) is sequential_search(cryptos, crypto.name)[0]


def test_binary_search_missing_returns_none():
    cryptos = default_simulator().cryptos
    insertion_sort_by_name(cryptos, True)
    assert binary_search(cryptos, "Dogecoin") is None
    assert binary_search([], "Bitcoin") is None