"""Student tests."""
