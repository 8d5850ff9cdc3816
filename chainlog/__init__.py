"""Tamper-evident hash-chained logging: server, proof-of-work client, chain checker and hashing helpers."""

__version__ = "0.1.0"