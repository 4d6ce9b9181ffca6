"""Numeric building blocks of the ranking pipeline (numpy only)."""
