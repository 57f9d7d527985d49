"""Controller base class for controller_helper.

Subclassing ``Controller`` registers the subclass with the controller
registry. Public methods whose declared return type is ``ActionResult`` (or
a subclass, or an awaitable of one) are the controller's actions.

Example:
    class HomeController(Controller):
        def index(self) -> ActionResult:
            return self.json_ok({"page": "home"})

        async def save(self, item: Item) -> JsonResult:
            if not item.name:
                return self.json_error(422, "Name is required")
            return self.json_ok(item)
"""

from typing import Any, List, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from controller_helper.reflection import non_action
from controller_helper.registry import register_controller
from controller_helper.response import json_error, json_ok

# Return type that marks a controller method as an action
ActionResult = Response
JsonResult = JSONResponse


class Controller:
    """Base class for MVC controllers.

    Attributes:
        request: The request being handled, if any
        response: Mutable response whose status code and headers the
            helpers update
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        register_controller(cls)

    def __init__(
        self, request: Optional[Request] = None, response: Optional[Response] = None
    ) -> None:
        self.request = request
        self.response = response if response is not None else Response()

    @non_action
    def json_ok(self, data: Any = None) -> JSONResponse:
        """Return a JSON success response."""
        return json_ok(self, data)

    @non_action
    def json_error(
        self, error_code: Optional[int] = None, message: str = "", data: Any = None
    ) -> JSONResponse:
        """Return a JSON error response and set this controller's status code."""
        return json_error(self, error_code=error_code, message=message, data=data)

    @classmethod
    def has_action(
        cls, action_name: str, include_async: Optional[bool] = None
    ) -> bool:
        """Check whether this controller has a given action."""
        from controller_helper.actions import has_action

        return has_action(cls, action_name, include_async=include_async)

    @classmethod
    def get_actions(cls, include_async: Optional[bool] = None) -> List[str]:
        """List this controller's action names."""
        from controller_helper.actions import get_actions

        return get_actions(cls, include_async=include_async)


__all__ = ["Controller", "ActionResult", "JsonResult"]
