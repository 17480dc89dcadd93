"""Adapters – integrations with external infrastructure."""
