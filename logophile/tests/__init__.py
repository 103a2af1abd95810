"""Logophile test suite."""
