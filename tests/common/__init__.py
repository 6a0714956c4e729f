"""Common route tests."""
