"""Helpers for building chat model fixtures in tests."""
