"""Test suite for the students API."""
