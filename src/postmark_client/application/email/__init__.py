"""Application email – message composition value objects."""
from postmark_client.application.email.attachment import (
    DEFAULT_CONTENT_TYPE,
    MAX_ATTACHMENT_BYTES,
    Attachment,
    guess_content_type,
)
from postmark_client.application.email.batch import MAX_BATCH_SIZE, Batch, partition
from postmark_client.application.email.body import (
    DEFAULT_MAX_ATTACHMENTS,
    MAX_MESSAGE_BYTES,
    MAX_RECIPIENTS,
    MAX_TAG_LENGTH,
    OutboundEmailBody,
    OutboundEmailBodyBuilder,
    TrackLinks,
)
from postmark_client.application.email.receipt import SendReceipt

__all__ = [
    "Attachment",
    "Batch",
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_MAX_ATTACHMENTS",
    "MAX_ATTACHMENT_BYTES",
    "MAX_BATCH_SIZE",
    "MAX_MESSAGE_BYTES",
    "MAX_RECIPIENTS",
    "MAX_TAG_LENGTH",
    "OutboundEmailBody",
    "OutboundEmailBodyBuilder",
    "SendReceipt",
    "TrackLinks",
    "guess_content_type",
]
