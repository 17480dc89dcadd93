"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvariantViolationError
    │   ├── ValidationError
    │   │   ├── InvalidEmailAddressError
    │   │   ├── MissingBodyError
    │   │   ├── TooManyAttachmentsError
    │   │   ├── TooManyRecipientsError
    │   │   └── MessageTooLargeError
    │   └── AttachmentError
    │       ├── AttachmentNotFoundError
    │       ├── EmptyAttachmentError
    │       └── AttachmentTooLargeError
    ├── ApplicationError         (base.py)
    │   └── ConfigError          (config.validation)
    └── InfrastructureError      (infrastructure.py)
        └── SendError
            ├── TransportError
            ├── SendTimeoutError
            ├── RateLimitedError
            ├── MalformedResponseError
            ├── PayloadError
            └── ApiError
                ├── AuthenticationError
                └── ServerError
"""

from postmark_client.kernel.errors.base import ApplicationError, BaseError
from postmark_client.kernel.errors.domain import (
    AttachmentError,
    AttachmentNotFoundError,
    AttachmentTooLargeError,
    DomainError,
    EmptyAttachmentError,
    InvalidEmailAddressError,
    InvariantViolationError,
    MessageTooLargeError,
    MissingBodyError,
    TooManyAttachmentsError,
    TooManyRecipientsError,
    ValidationError,
)
from postmark_client.kernel.errors.infrastructure import (
    ApiError,
    AuthenticationError,
    InfrastructureError,
    MalformedResponseError,
    PayloadError,
    RateLimitedError,
    SendError,
    SendTimeoutError,
    ServerError,
    TransportError,
)

__all__ = [
    "ApiError",
    "ApplicationError",
    "AttachmentError",
    "AttachmentNotFoundError",
    "AttachmentTooLargeError",
    "AuthenticationError",
    "BaseError",
    "DomainError",
    "EmptyAttachmentError",
    "InfrastructureError",
    "InvalidEmailAddressError",
    "InvariantViolationError",
    "MalformedResponseError",
    "MessageTooLargeError",
    "MissingBodyError",
    "PayloadError",
    "RateLimitedError",
    "SendError",
    "SendTimeoutError",
    "ServerError",
    "TooManyAttachmentsError",
    "TooManyRecipientsError",
    "TransportError",
    "ValidationError",
]
