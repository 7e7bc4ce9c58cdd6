"""Terminal crypto trading simulator with a virtual balance, portfolio and history."""

__version__ = "0.1.0"