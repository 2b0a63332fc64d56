"""Evenue party database: schema, sample data and report queries."""

__version__ = "0.1.0"
