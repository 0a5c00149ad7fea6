"""Structured parsing of collective bargaining agreements."""
