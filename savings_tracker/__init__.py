"""Savings goal tracker: projection engine, goal store and JSON API."""
