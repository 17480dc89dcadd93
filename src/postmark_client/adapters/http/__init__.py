"""HTTP adapter – httpx transport, wire codec and send pipeline."""
from postmark_client.adapters.http.client import HttpClient, HttpxHttpClient
from postmark_client.adapters.http.pipeline import send, send_batch

__all__ = ["HttpClient", "HttpxHttpClient", "send", "send_batch"]
