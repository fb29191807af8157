"""Shared utilities for fuzzyjson."""
