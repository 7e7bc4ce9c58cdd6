import re

import pytest

from cryptosim.models import (
    BUY,
    INITIAL_BALANCE,
    MAX_CRYPTOS,
    MAX_TRANSACTIONS,
    SELL,
    Simulator,
    SimulatorError,
    default_simulator,
)


def test_default_simulator_listings():
    sim = default_simulator()
    assert [c.name for c in sim.cryptos] == ["Bitcoin", "Ethereum", "Cardano"]
    assert [c.symbol for c in sim.cryptos] == ["BTC", "ETH", "ADA"]
    assert sim.balance == 10000
    assert sim.transactions == []


def test_add_crypto_full_list_raises():
    sim = Simulator()
    for n in range(MAX_CRYPTOS):
        sim.add_crypto(f"c{n}", "S", 1, 1)
    with pytest.raises(SimulatorError):
        sim.add_crypto("extra", "X", 1, 1)
    assert len(sim.cryptos) == MAX_CRYPTOS


def test_get_is_one_based_and_validated():
    sim = default_simulator()
    assert sim.get(1).name == "Bitcoin"
    assert sim.get(3).name == "Cardano"
    for bad in (0, 4, -1):
        with pytest.raises(SimulatorError):
            sim.get(bad)


def test_remove_crypto_shifts_remaining():
    sim = default_simulator()
    removed = sim.remove_crypto(1)
    assert removed.name == "Bitcoin"
    assert [c.name for c in sim.cryptos] == ["Ethereum", "Cardano"]
    with pytest.raises(SimulatorError):
        sim.remove_crypto(3)


def test_edit_keeps_values_for_empty_fields():
    sim = default_simulator()
    before = sim.get(2)
    old = (before.name, before.symbol, before.price, before.market_cap)
    sim.edit_crypto(2, "", "", 0, -5)
    after = sim.get(2)
    assert (after.name, after.symbol, after.price, after.market_cap) == old


def test_edit_replaces_given_fields():
    sim = default_simulator()
    sim.edit_crypto(3, "Solana", "SOL", 150.0, 1e10)
    crypto = sim.get(3)
    assert (crypto.name, crypto.symbol, crypto.price, crypto.market_cap) == (
        "Solana",
        "SOL",
        150.0,
        1e10,
    )


def test_edit_invalid_number_raises():
    sim = default_simulator()
    with pytest.raises(SimulatorError):
        sim.edit_crypto(9, "X", "X", 1, 1)


def test_buy_updates_balance_and_holdings():
    sim = default_simulator()
    tx = sim.buy(2, 2)
    assert tx.kind == BUY
    assert tx.name == "Ethereum"
    assert tx.total == 2 * sim.get(2).price
    assert sim.get(2).amount == 2
    assert sim.balance + sim.portfolio_value() == INITIAL_BALANCE


def test_buy_insufficient_balance_raises_and_changes_nothing():
    sim = default_simulator()
    with pytest.raises(SimulatorError):
        sim.buy(1, 1)
    assert sim.balance == INITIAL_BALANCE
    assert sim.get(1).amount == 0
    assert sim.transactions == []


@pytest.mark.parametrize("amount", [0, -1])
def test_buy_nonpositive_amount_raises(amount):
    sim = default_simulator()
    with pytest.raises(SimulatorError):
        sim.buy(3, amount)
    assert sim.balance == INITIAL_BALANCE


def test_buy_then_sell_round_trip():
    sim = default_simulator()
    sim.buy(2, 2)
    tx = sim.sell(2, 2)
    assert tx.kind == SELL
    assert sim.balance == INITIAL_BALANCE
    assert sim.get(2).amount == 0
    assert [t.id for t in sim.transactions] == [1, 2]


def test_sell_not_owned_raises():
    sim = default_simulator()
    with pytest.raises(SimulatorError):
        sim.sell(1, 1)


def test_sell_more_than_owned_raises():
    sim = default_simulator()
    sim.buy(3, 10)
    with pytest.raises(SimulatorError):
        sim.sell(3, 11)
    with pytest.raises(SimulatorError):
        sim.sell(3, 0)
    assert sim.get(3).amount == 10


def test_owned_lists_only_held():
    sim = default_simulator()
    assert sim.owned() == []
    sim.buy(3, 4)
    assert [c.name for c in sim.owned()] == ["Cardano"]


def test_portfolio_value_zero_initially():
    assert default_simulator().portfolio_value() == 0


def test_record_default_time_format():
    sim = Simulator()
    tx = sim.record(BUY, "Bitcoin", 1.0, 2.0, 2.0)
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", tx.when)
    assert tx.id == 1


def test_record_drops_oldest_when_full():
    sim = Simulator()
    for n in range(MAX_TRANSACTIONS + 1):
        sim.record(BUY, f"c{n}", 1.0, 1.0, 1.0, when="t")
    assert len(sim.transactions) == MAX_TRANSACTIONS
    assert sim.transactions[0].name == "c1"
    assert sim.transactions[-1].name == f"c{MAX_TRANSACTIONS}"
    assert sim.transactions[-1].id == MAX_TRANSACTIONS