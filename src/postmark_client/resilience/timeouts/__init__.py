"""Resilience – caller deadlines."""
from postmark_client.resilience.timeouts.policy import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
