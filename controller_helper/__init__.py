"""
controller_helper - Controller extension helpers for FastAPI MVC applications.

controller_helper provides the small conveniences an MVC layer on top of
FastAPI keeps reaching for: JSON success/error envelopes, a registry of
controller classes, and a classifier that decides whether a controller method
is an action endpoint.

Main Exports (Import from top level):
    Controllers:
        - Controller: Base class, registers every subclass
        - ActionResult: Return type marking a method as an action
        - JsonResult: JSON action result
        - non_action: Exclude a public method from the actions

    Actions:
        - has_action: Whether a controller class has a named action
        - is_action_result: Whether a method returns an action result
        - is_return_type_of: Whether a method returns a given type
        - get_actions: Action names of a controller class
        - controller_has_action: has_action by controller name

    Registry:
        - get_controller_names: Names of all registered controllers
        - get_controllers, find_controller, get_controller

    Responses:
        - json_ok: JSON success response
        - json_error: JSON error response

    Configuration:
        - ControllerHelperConfig, get_config, set_config, configure_logging

Example:
    >>> from controller_helper import ActionResult, Controller, has_action
    >>>
    >>> class HomeController(Controller):
    ...     def index(self) -> ActionResult:
    ...         return self.json_ok({"page": "home"})
    ...
    ...     def helper(self) -> int:
    ...         return 1
    >>>
    >>> has_action(HomeController, "Index")
    True
    >>> has_action(HomeController, "Helper")
    False
"""

__version__ = "0.1.0"

from . import exceptions

# Actions
from .actions import (
    AMBIGUOUS_MATCH_IS_ACTION,
    controller_has_action,
    get_actions,
    has_action,
    is_action_result,
    is_return_type_of,
)

# Configuration
from .config import (
    ControllerHelperConfig,
    configure_logging,
    get_config,
    reset_config,
    set_config,
)

# Controllers
from .controller import ActionResult, Controller, JsonResult
from .reflection import MethodDescriptor, describe_methods, get_method, non_action

# Registry
from .registry import (
    clear_controllers,
    find_controller,
    get_controller,
    get_controller_names,
    get_controllers,
)

# Responses
from .response import json_error, json_ok

__all__ = [
    # Version
    "__version__",
    # Controllers
    "Controller",
    "ActionResult",
    "JsonResult",
    "non_action",
    # Actions
    "AMBIGUOUS_MATCH_IS_ACTION",
    "has_action",
    "is_action_result",
    "is_return_type_of",
    "get_actions",
    "controller_has_action",
    # Reflection
    "MethodDescriptor",
    "describe_methods",
    "get_method",
    # Registry
    "get_controller_names",
    "get_controllers",
    "find_controller",
    "get_controller",
    "clear_controllers",
    # Responses
    "json_ok",
    "json_error",
    # Configuration
    "ControllerHelperConfig",
    "get_config",
    "set_config",
    "reset_config",
    "configure_logging",
    # Modules
    "exceptions",
]
