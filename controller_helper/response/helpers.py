"""Response helper utilities for controller_helper."""

import logging
from typing import TYPE_CHECKING, Any, Optional, Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from controller_helper.config import get_config

from .types import Envelope, ErrorEnvelope, SuccessEnvelope

if TYPE_CHECKING:
    from controller_helper.controller import Controller

logger = logging.getLogger(__name__)


def _success_flag(success: bool) -> Union[bool, str]:
    if get_config().legacy_string_success:
        return str(success)
    return success


def _render(envelope: Envelope, status_code: int) -> JSONResponse:
    return JSONResponse(content=envelope.model_dump(), status_code=status_code)


def json_ok(
    controller: Optional["Controller"] = None, data: Any = None
) -> JSONResponse:
    """Return a JSON success response.

    Args:
        controller: Controller handling the request; unused, accepted so the
            helper reads the same as ``json_error``
        data: Optional payload

    Returns:
        JSONResponse with ``{"success": true, "data": data}`` and status 200
    """
    envelope = SuccessEnvelope(
        success=_success_flag(True), data=jsonable_encoder(data)
    )
    return _render(envelope, status_code=200)


def json_error(
    controller: Optional["Controller"] = None,
    error_code: Optional[int] = None,
    message: str = "",
    data: Any = None,
) -> JSONResponse:
    """Return a JSON error response.

    Args:
        controller: Controller handling the request; its response status code
            is set to ``error_code``
        error_code: HTTP status code, defaults to ``default_error_code`` (400)
        message: Error message to pass to the front end
        data: Optional payload

    Returns:
        JSONResponse with ``{"success": false, "message": ..., "data": ...}``
    """
    if error_code is None:
        error_code = get_config().default_error_code

    if controller is not None:
        controller.response.status_code = error_code

    logger.debug(f"JSON error response [{error_code}]: {message}")
    envelope = ErrorEnvelope(
        success=_success_flag(False), message=message, data=jsonable_encoder(data)
    )
    return _render(envelope, status_code=error_code)


__all__ = ["json_ok", "json_error"]
