"""Market state: listed cryptocurrencies, the virtual balance and trade history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

MAX_CRYPTOS = 100
MAX_TRANSACTIONS = 200
INITIAL_BALANCE = 10000.0
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

BUY = "beli"
SELL = "jual"


class SimulatorError(Exception):
    """Raised when an operation on the simulator is rejected."""


@dataclass
class Crypto:
    """A listed cryptocurrency and the amount of it held."""

    name: str
    symbol: str
    price: float
    market_cap: float
    amount: float = 0.0


@dataclass(frozen=True)
class Transaction:
    """One completed buy or sell."""

    id: int
    kind: str
    name: str
    amount: float
    price: float
    total: float
    when: str


class Simulator:
    """Holds the crypto list, the balance and the transaction history.

    Cryptos are addressed by their 1-based position in the list.
    """

    def __init__(self, balance=INITIAL_BALANCE):
        self.balance = float(balance)
        self.cryptos: list[Crypto] = []
        self.transactions: list[Transaction] = []

    def add_crypto(self, name, symbol, price, market_cap):
        """Append a new crypto; raises when the list is full."""
        if len(self.cryptos) >= MAX_CRYPTOS:
            raise SimulatorError("Daftar penuh!")
        crypto = Crypto(name, symbol, float(price), float(market_cap))
        self.cryptos.append(crypto)
        return crypto

    def get(self, number):
        """Return the crypto at 1-based position ``number``."""
        if not 1 <= number <= len(self.cryptos):
            raise SimulatorError("Nomor tidak valid!")
        return self.cryptos[number - 1]

    def edit_crypto(self, number, name="", symbol="", price=0.0, market_cap=0.0):
        """Update a crypto; empty strings and non-positive numbers keep the old value."""
        crypto = self.get(number)
        if name:
            crypto.name = name
        if symbol:
            crypto.symbol = symbol
        if price > 0:
            crypto.price = float(price)
        if market_cap > 0:
            crypto.market_cap = float(market_cap)
        return crypto

    def remove_crypto(self, number):
        """Remove and return the crypto at 1-based position ``number``."""
        self.get(number)
        return self.cryptos.pop(number - 1)

    def owned(self):
        """Cryptos of which a positive amount is held."""
        return [crypto for crypto in self.cryptos if crypto.amount > 0]

    def buy(self, number, amount):
        """Buy ``amount`` of a crypto with the balance and record it."""
        crypto = self.get(number)
        if amount <= 0:
            raise SimulatorError("Jumlah harus positif!")
        total = amount * crypto.price
        if total > self.balance:
            raise SimulatorError("Saldo tidak cukup!")
        self.balance -= total
        crypto.amount += amount
        return self.record(BUY, crypto.name, amount, crypto.price, total)

    def sell(self, number, amount):
        """Sell ``amount`` of a held crypto into the balance and record it."""
        crypto = self.get(number)
        if crypto.amount <= 0:
            raise SimulatorError("Anda tidak memiliki crypto ini!")
        if amount <= 0:
            raise SimulatorError("Jumlah harus positif!")
        if amount > crypto.amount:
            raise SimulatorError("Jumlah melebihi kepemilikan!")
        total = amount * crypto.price
        self.balance += total
        crypto.amount -= amount
        return self.record(SELL, crypto.name, amount, crypto.price, total)

    def record(self, kind, name, amount, price, total, when=None):
        """Append a transaction, dropping the oldest once the history is full."""
        overflow = len(self.transactions) - (MAX_TRANSACTIONS - 1)
        if overflow > 0:
            del self.transactions[:overflow]
        if when is None:
            when = datetime.now().strftime(TIME_FORMAT)
        transaction = Transaction(
            id=len(self.transactions) + 1,
            kind=kind,
            name=name,
            amount=amount,
            price=price,
            total=total,
            when=when,
        )
        self.transactions.append(transaction)
        return transaction

    def portfolio_value(self):
        """Current market value of all held cryptos."""
        return sum(c.amount * c.price for c in self.cryptos if c.amount > 0)


def default_simulator():
    """A simulator with the starting balance and the three initial listings."""
    simulator = Simulator()
    simulator.add_crypto("Bitcoin", "BTC", 50000, 950000000000)
    simulator.add_crypto("Ethereum", "ETH", 3000, 360000000000)
    simulator.add_crypto("Cardano", "ADA", 1.5, 50000000000)
    return simulator