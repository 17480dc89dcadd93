"""Testing helpers for code built on postmark_client (needs the ``test`` extra)."""
