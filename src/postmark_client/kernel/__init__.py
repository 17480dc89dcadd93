"""Kernel – error hierarchy and value objects shared by every layer."""
