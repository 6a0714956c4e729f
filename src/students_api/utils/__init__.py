"""Application wiring helpers."""
