"""
postmark_client – transactional email client for the Postmark API.

Import path convention::

    from postmark_client import Client, OutboundEmailBody, EmailAddress
    from postmark_client.kernel.errors import SendError, ValidationError
    from postmark_client.config.settings import EnvSettingsLoader, PostmarkSettings
    from postmark_client.observability.logging import JsonLoggerFactory
"""

from postmark_client.application.email import (
    Attachment,
    OutboundEmailBody,
    OutboundEmailBodyBuilder,
    SendReceipt,
    TrackLinks,
    partition,
)
from postmark_client.client import Client, ClientBuilder
from postmark_client.kernel.types import EmailAddress, Err, Ok, Result, SecretToken

__version__ = "0.1.0"
__all__ = [
    "Attachment",
    "Client",
    "ClientBuilder",
    "EmailAddress",
    "Err",
    "Ok",
    "OutboundEmailBody",
    "OutboundEmailBodyBuilder",
    "Result",
    "SecretToken",
    "SendReceipt",
    "TrackLinks",
    "__version__",
    "partition",
]
