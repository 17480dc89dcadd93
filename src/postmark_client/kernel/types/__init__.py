"""Kernel value-object types – public re-export surface.

Modules:
  email.py: EmailAddress
  secret.py: SecretToken
  result.py: Ok, Err, Result
"""

from postmark_client.kernel.types.email import EmailAddress
from postmark_client.kernel.types.result import Err, Ok, Result
from postmark_client.kernel.types.secret import SecretToken

__all__ = [
    "EmailAddress",
    "Err",
    "Ok",
    "Result",
    "SecretToken",
]
