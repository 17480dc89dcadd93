"""Resilience – retry and deadline policies applied around network calls."""
