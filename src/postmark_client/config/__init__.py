"""Config – settings loading and validation errors."""
