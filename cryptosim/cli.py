"""Interactive text menus for the crypto trading simulator."""

from __future__ import annotations

import argparse
import sys

from .display import (
    format_crypto_detail,
    format_crypto_table,
    format_history,
    format_portfolio,
)
from .models import SimulatorError, default_simulator
from .searching import binary_search, sequential_search
from .sorting import (
    insertion_sort_by_name,
    selection_sort_by_market_cap,
    selection_sort_by_price,
)

CLEAR_SCREEN = "\033[H\033[2J"


class App:
    """Menu-driven front end over a :class:`~cryptosim.models.Simulator`."""

    def __init__(self, simulator=None, input_func=None, output=None):
        self.simulator = simulator if simulator is not None else default_simulator()
        self._input = input_func if input_func is not None else input
        self._out = output if output is not None else sys.stdout

    # -- terminal helpers -------------------------------------------------

    def _write(self, text):
        self._out.write(text)
        flush = getattr(self._out, "flush", None)
        if flush is not None:
            flush()

    def _print(self, text=""):
        self._write(text + "\n")

    def _clear(self):
        self._write(CLEAR_SCREEN)

    def _read_line(self, prompt=""):
        self._write(prompt)
        try:
            return self._input()
        except EOFError:
            return ""

    def _read_token(self, prompt):
        parts = self._read_line(prompt).split()
        return parts[0] if parts else ""

    def _read_int(self, prompt):
        try:
            return int(self._read_token(prompt))
        except ValueError:
            return 0

    def _read_float(self, prompt):
        try:
            return float(self._read_token(prompt))
        except ValueError:
            return 0.0

    def _wait(self):
        self._read_line("\nTekan Enter untuk melanjutkan...")

    def _invalid_choice(self):
        self._print("Input salah!")
        self._wait()

    def _submenu(self, title, entries, header=None):
        """Loop over a numbered menu until 0 is chosen."""
        while True:
            self._clear()
            self._print(title)
            if header is not None:
                self._print(header())
            for number, (label, _) in enumerate(entries, start=1):
                self._print(f"{number}. {label}")
            self._print("0. Kembali")
            choice = self._read_int("Pilih: ")
            if choice == 0:
                return
            if 1 <= choice <= len(entries):
                entries[choice - 1][1]()
            else:
                self._invalid_choice()

    def _show_table(self, only_owned=False):
        self._write(format_crypto_table(self.simulator.cryptos, only_owned))

    def _pick_crypto(self, prompt):
        """Ask for a 1-based crypto number; report and return None if invalid."""
        number = self._read_int(prompt)
        try:
            return number, self.simulator.get(number)
        except SimulatorError as error:
            self._print(str(error))
            self._wait()
            return None

    # -- main menu --------------------------------------------------------

    def run(self):
        """Run the main menu until the user chooses to leave."""
        actions = {
            1: self._crypto_menu,
            2: self._transaction_menu,
            3: self._portfolio_menu,
            4: self._history_menu,
            5: self._search_menu,
            6: self._sort_menu,
        }
        while True:
            self._clear()
            self._print("=== APLIKASI SIMULASI CRYPTO ===")
            self._print(f"Saldo: ${self.simulator.balance:.2f}\n")
            self._print("1. Kelola Crypto")
            self._print("2. Transaksi")
            self._print("3. Portofolio")
            self._print("4. Riwayat Transaksi")
            self._print("5. Cari Crypto")
            self._print("6. Urutkan Crypto")
            self._print("0. Keluar")
            choice = self._read_int("Pilih menu: ")
            if choice == 0:
                self._print("Terima kasih!")
                return
            action = actions.get(choice)
            if action is None:
                self._invalid_choice()
            else:
                action()

    # -- crypto management ------------------------------------------------

    def _crypto_menu(self):
        self._submenu(
            "=== KELOLA CRYPTO ===",
            [
                ("Tambah Crypto", self._add_crypto),
                ("Edit Crypto", self._edit_crypto),
                ("Hapus Crypto", self._remove_crypto),
                ("Lihat Daftar", self._list_cryptos),
            ],
        )

    def _list_cryptos(self):
        self._show_table()
        self._wait()

    def _add_crypto(self):
        self._clear()
        self._print("=== TAMBAH CRYPTO ===")
        name = self._read_token("Nama: ")
        symbol = self._read_token("Simbol: ")
        price = self._read_float("Harga: ")
        market_cap = self._read_float("Kapitalisasi: ")
        try:
            self.simulator.add_crypto(name, symbol, price, market_cap)
        except SimulatorError as error:
            self._print(f"Error: {error}")
        else:
            self._print("Berhasil ditambahkan!")
        self._wait()

    def _edit_crypto(self):
        self._clear()
        self._show_table()
        if not self.simulator.cryptos:
            self._wait()
            return
        picked = self._pick_crypto("\nPilih nomor Crypto yang akan diedit: ")
        if picked is None:
            return
        number, crypto = picked
        name = self._read_token(f"Nama ({crypto.name}): ")
        symbol = self._read_token(f"Simbol ({crypto.symbol}): ")
        price = self._read_float(f"Harga ({crypto.price:.2f}): ")
        market_cap = self._read_float(f"Kapitalisasi ({crypto.market_cap:.2f}): ")
        self.simulator.edit_crypto(number, name, symbol, price, market_cap)
        self._print("Data berhasil diupdate!")
        self._wait()

    def _remove_crypto(self):
        self._clear()
        self._show_table()
        if not self.simulator.cryptos:
            self._wait()
            return
        picked = self._pick_crypto("\nPilih nomor crypto yang akan dihapus: ")
        if picked is None:
            return
        self.simulator.remove_crypto(picked[0])
        self._print("Crypto berhasil dihapus!")
        self._wait()

    # -- trading ----------------------------------------------------------

    def _transaction_menu(self):
        self._submenu(
            "=== TRANSAKSI ===",
            [("Beli", self._buy), ("Jual", self._sell)],
            header=lambda: f"Saldo: ${self.simulator.balance:.2f}\n",
        )

    def _buy(self):
        self._clear()
        self._print("=== BELI CRYPTO ===")
        self._show_table()
        if not self.simulator.cryptos:
            self._wait()
            return
        picked = self._pick_crypto("\nPilih nomor crypto: ")
        if picked is None:
            return
        number, crypto = picked
        self._print(f"Harga {crypto.name}: ${crypto.price:.2f}")
        amount = self._read_float("Jumlah yang dibeli: ")
        try:
            transaction = self.simulator.buy(number, amount)
        except SimulatorError as error:
            self._print(str(error))
        else:
            self._print(
                f"Berhasil membeli {amount:.2f} {transaction.name} "
                f"seharga ${transaction.total:.2f}"
            )
        self._wait()

    def _sell(self):
        self._clear()
        self._print("=== JUAL CRYPTO ===")
        self._show_table(only_owned=True)
        if not self.simulator.cryptos:
            self._wait()
            return
        picked = self._pick_crypto("\nPilih nomor crypto: ")
        if picked is None:
            return
        number, crypto = picked
        if crypto.amount <= 0:
            self._print("Anda tidak memiliki crypto ini!")
            self._wait()
            return
        self._print(f"Anda memiliki {crypto.amount:.4f} {crypto.name}")
        amount = self._read_float("Jumlah yang dijual: ")
        try:
            transaction = self.simulator.sell(number, amount)
        except SimulatorError as error:
            self._print(str(error))
        else:
            self._print(
                f"Berhasil menjual {amount:.2f} {transaction.name} "
                f"seharga ${transaction.total:.2f}"
            )
        self._wait()

    # -- reports ----------------------------------------------------------

    def _portfolio_menu(self):
        self._clear()
        self._print("=== PORTOFOLIO CRYPTO ===")
        balance = self.simulator.balance
        self._print(f"Saldo Virtual: ${balance:.2f}\n")
        value = self.simulator.portfolio_value()
        self._print(f"Total Nilai Portofolio: ${value:.2f}")
        self._print(f"Total Aset (Saldo + Portofolio): ${balance + value:.2f}\n")
        self._write(format_portfolio(self.simulator.cryptos))
        self._wait()

    def _history_menu(self):
        self._clear()
        self._print("=== RIWAYAT TRANSAKSI ===")
        self._write(format_history(self.simulator.transactions))
        self._wait()

    # -- searching and sorting --------------------------------------------

    def _search_menu(self):
        self._submenu(
            "=== CARI CRYPTO ===",
            [
                ("Sequential Search", self._sequential_search),
                ("Binary Search", self._binary_search),
            ],
        )

    def _sequential_search(self):
        self._clear()
        name = self._read_token("Masukkan nama crypto: ")
        matches = sequential_search(self.simulator.cryptos, name)
        for crypto in matches:
            self._write(format_crypto_detail(crypto))
        if not matches:
            self._print("Tidak ditemukan!")
        self._wait()

    def _binary_search(self):
        self._clear()
        self._sort_by_name(ascending=True)
        name = self._read_token("Masukkan nama Crypto: ")
        crypto = binary_search(self.simulator.cryptos, name)
        if crypto is None:
            self._print("Tidak ditemukan!")
        else:
            self._write(format_crypto_detail(crypto))
        self._wait()

    def _sort_by_name(self, ascending):
        insertion_sort_by_name(self.simulator.cryptos, ascending)
        order = "ascending" if ascending else "descending"
        self._print(f"Data telah diurutkan berdasarkan nama ({order})!")

    def _sort_by_price(self):
        selection_sort_by_price(self.simulator.cryptos)
        self._print("Data telah diurutkan berdasarkan harga (ascending)!")

    def _sort_by_market_cap(self):
        selection_sort_by_market_cap(self.simulator.cryptos)
        self._print(
            "Data telah diurutkan berdasarkan kapitalisasi pasar (descending)!"
        )

    def _sort_and_show(self, sorter):
        def action():
            sorter()
            self._show_table()
            self._wait()

        return action

    def _sort_menu(self):
        self._submenu(
            "=== URUTKAN CRYPTO ===",
            [
                ("Selection Sort (Harga)", self._sort_and_show(self._sort_by_price)),
                (
                    "Insertion Sort (Nama - Ascending)",
                    self._sort_and_show(lambda: self._sort_by_name(True)),
                ),
                (
                    "Insertion Sort (Nama - Descending)",
                    self._sort_and_show(lambda: self._sort_by_name(False)),
                ),
                (
                    "Selection Sort (Kapitalisasi)",
                    self._sort_and_show(self._sort_by_market_cap),
                ),
            ],
        )


def main(argv=None):
    """Start the interactive simulator with the default listings."""
    parser = argparse.ArgumentParser(
        prog="cryptosim", description="Simulasi jual beli crypto dengan saldo virtual."
    )
    parser.parse_args(argv)
    App(default_simulator()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())