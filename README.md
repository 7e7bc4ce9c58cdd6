# cryptosim

`cryptosim` is a crypto trading simulator that runs in a terminal. You start with a virtual balance of $10,000 and three coins already listed: Bitcoin (BTC), Ethereum (ETH) and Cardano (ADA). From its menus you can:

- add, edit, remove and list crypto assets
- buy and sell against your virtual balance
- view your portfolio, with the value of each holding and your total assets
- browse the transaction history, which keeps the 200 most recent entries
- search for an asset by its exact name, with either a sequential or a binary search
- sort the list by price (ascending), by name (ascending or descending) or by market cap (descending)

The menus are in Indonesian.

## Installation

```
pip install .
```

## Usage

```
cryptosim
```

At each menu, type a number and press Enter. Choose `0` to go back one menu, or to quit from the main menu. Assets are chosen by their number in the list as it is currently shown. Sorting reorders the list, so the numbers change after a sort. A binary search also sorts the list by name first.

`cryptosim --help` prints a short usage message. The command takes no other options.

## Using it as a library

```python
from cryptosim.models import default_simulator
from cryptosim.sorting import selection_sort_by_price
from cryptosim.display import format_portfolio

sim = default_simulator()
sim.buy(1, 0.1)            # buy 0.1 of the first listed asset
print(sim.balance)
selection_sort_by_price(sim.cryptos)
print(format_portfolio(sim.cryptos))
```

The modules are:

- `cryptosim.models`: `Simulator` (with `add_crypto`, `edit_crypto`, `remove_crypto`, `get`, `owned`, `buy`, `sell`, `record` and `portfolio_value`), the `Crypto` and `Transaction` dataclasses, `SimulatorError` and `default_simulator()`.
- `cryptosim.sorting`: `insertion_sort_by_name`, `selection_sort_by_price` and `selection_sort_by_market_cap`. Each one sorts a list in place.
- `cryptosim.searching`: `sequential_search`, which returns every match, and `binary_search`, which needs a list sorted by name and returns one match or `None`.
- `cryptosim.display`: `format_crypto_detail`, `format_crypto_table`, `format_portfolio` and `format_history`. Each returns the text of a table or block.
- `cryptosim.cli`: `App`, the menu front end, and `main`.

Invalid operations raise `cryptosim.models.SimulatorError`. These include an unknown list number, a full asset list (100 entries), a non-positive amount, too little balance, and selling an asset you do not hold or more than you hold.

## What it does not do

- Nothing is saved. The balance, the assets and the history exist only while the program runs.
- Prices do not move on their own, and no market data is fetched. A price changes only when you edit it.

## Running the tests

```
pip install .[test]
pytest
```