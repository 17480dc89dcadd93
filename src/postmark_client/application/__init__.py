"""Application layer – message composition and batching."""
