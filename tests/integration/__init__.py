"""Integration tests for pytuyalights with real API."""
