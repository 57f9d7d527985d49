"""Response handling for controller_helper.

This module provides the JSON success/error envelopes returned by
controllers, and the helpers that build them.
"""

from .helpers import json_error, json_ok
from .types import Envelope, ErrorEnvelope, SuccessEnvelope

__all__ = [
    "json_ok",
    "json_error",
    "Envelope",
    "SuccessEnvelope",
    "ErrorEnvelope",
]
