"""Deterministic test doubles for propcheck protocols."""
