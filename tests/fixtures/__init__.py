"""Shared fixtures and test data (no tests here)."""
