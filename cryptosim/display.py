"""Text renderings of cryptos, the portfolio and the transaction history."""

from __future__ import annotations

_DETAIL_RULE = "=" * 36
_TABLE_RULE = "=" * 48
_PORTFOLIO_RULE = "=" * 58
_HISTORY_RULE = "=" * 68


def _join(lines):
    return "\n".join(lines) + "\n"


def format_crypto_detail(crypto):
    """Detail block for a single crypto."""
    return _join(
        [
            "",
            "DETAIL CRYPTO:",
            _DETAIL_RULE,
            f"Nama: {crypto.name}",
            f"Simbol: {crypto.symbol}",
            f"Harga: ${crypto.price:.2f}",
            f"Kapitalisasi Pasar: ${crypto.market_cap:.2f}",
            f"Jumlah Dimiliki: {crypto.amount:.4f}",
            _DETAIL_RULE,
        ]
    )


def format_crypto_table(cryptos, only_owned=False):
    """Numbered table of cryptos; numbers are positions in the full list."""
    header = (
        f"{'No':<4} {'Nama':<10} {'Simbol':<6} {'Harga':<12} "
        f"{'Kapitalisasi':<15} {'Dimiliki':<10}"
    )
    rows = [
        f"{number:<4d} {c.name:<10} {c.symbol:<6} ${c.price:<12.2f} "
        f"${c.market_cap:<15.2f} {c.amount:<10.4f}"
        for number, c in enumerate(cryptos, start=1)
        if not only_owned or c.amount > 0
    ]
    return _join(["", "DAFTAR CRYPTO:", _TABLE_RULE, header, _TABLE_RULE, *rows, _TABLE_RULE])


def format_portfolio(cryptos):
    """Table of held cryptos with their current value."""
    header = (
        f"{'No':<5} {'Crypto':<12} {'Jumlah':<10} {'Harga Satuan':<15} {'Total Nilai':<15}"
    )
    held = [c for c in cryptos if c.amount > 0]
    rows = [
        f"{number:<5d} {c.name:<12} {c.amount:<10.4f} ${c.price:<15.2f} "
        f"${c.amount * c.price:<15.2f}"
        for number, c in enumerate(held, start=1)
    ]
    if not rows:
        rows = [" Anda belum memiliki aset crypto"]
    return _join(["CRYPTO YANG DIMILIKI:", _PORTFOLIO_RULE, header, _PORTFOLIO_RULE, *rows, _PORTFOLIO_RULE])


def format_history(transactions):
    """Table of recorded transactions, or a notice when there are none."""
    if not transactions:
        return "\nBelum ada transaksi!\n"
    header = (
        f"{'ID':<4} {'Jenis':<8} {'Nama':<12} {'Jumlah':<10} "
        f"{'Harga':<12} {'Total':<12} {'Waktu':<10}"
    )
    rows = [
        f"{t.id:<4d} {t.kind:<8} {t.name:<12} {t.amount:<10.4f} "
        f"${t.price:<12.2f} ${t.total:<12.2f} {t.when:<10}"
        for t in transactions
    ]
    return _join(["", "DAFTAR TRANSAKSI:", _HISTORY_RULE, header, _HISTORY_RULE, *rows, _HISTORY_RULE])