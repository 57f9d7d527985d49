"""Response envelope definitions for controller_helper."""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class Envelope(BaseModel):
    """Base class for all JSON envelopes."""

    model_config = ConfigDict(extra="forbid")

    success: Union[bool, str] = Field(
        description="Whether the request was successful"
    )
    data: Any = Field(None, description="Response payload")


class SuccessEnvelope(Envelope):
    """Successful response envelope: ``{"success": true, "data": ...}``."""

    success: Union[bool, str] = Field(True, description="Request was successful")


class ErrorEnvelope(Envelope):
    """Error response envelope: ``{"success": false, "message": ..., "data": ...}``."""

    success: Union[bool, str] = Field(False, description="Request failed")
    message: str = Field("", description="Error message for the front end")
