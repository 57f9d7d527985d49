"""Action classification for controller classes.

A controller method is an action when its declared return type is the
action-result type (``ActionResult``) or one of its subclasses. Awaitables of
the action result count too unless ``include_async`` is turned off.

Method names are matched case-insensitively. When a name matches more than
one method the classifier does not try to pick one: it reports the name as
an action, since dropping a real action is the worse mistake.
"""

import inspect
import logging
from typing import Any, Callable, List, Optional, Union, get_origin

from controller_helper.config import get_config
from controller_helper.controller import ActionResult
from controller_helper.exceptions import AmbiguousMatchError
from controller_helper.reflection import (
    MethodDescriptor,
    awaited_type,
    describe_methods,
    get_method,
    get_return_type,
)
from controller_helper.registry import find_controller

logger = logging.getLogger(__name__)

AMBIGUOUS_MATCH_IS_ACTION = True

MethodLike = Union[MethodDescriptor, Callable[..., Any]]


def _declared_return_type(method: MethodLike) -> Any:
    if isinstance(method, MethodDescriptor):
        return method.return_type
    return get_return_type(method)


def _is_plain_class(tp: Any) -> bool:
    return inspect.isclass(tp) and get_origin(tp) is None


def _type_matches(candidate: Any, target: Any, include_subclasses: bool) -> bool:
    if candidate is target or candidate == target:
        return True
    if not include_subclasses:
        return False
    # Parameterized generics only ever match by equality
    if _is_plain_class(candidate) and _is_plain_class(target):
        return issubclass(candidate, target)
    return False


def is_return_type_of(
    method: MethodLike, target: Any, include_subclasses: bool = True
) -> bool:
    """Test whether a method returns ``target`` or a subclass of it.

    Args:
        method: Function, bound method or MethodDescriptor
        target: The target return type
        include_subclasses: Whether subclasses of ``target`` also match

    Returns:
        True if the declared return type matches, False if not

    Example:
        >>> is_return_type_of(HomeController.index, ActionResult)
        True
    """
    return _type_matches(_declared_return_type(method), target, include_subclasses)


def is_action_result(
    method: MethodLike, include_async: bool = True, include_subclasses: bool = True
) -> bool:
    """Test whether a method returns an action result.

    Args:
        method: Function, bound method or MethodDescriptor
        include_async: Whether an awaitable of an action result also matches
        include_subclasses: Whether subclasses of ``ActionResult`` also match

    Returns:
        True if the method is an action result, False if not
    """
    return_type = _declared_return_type(method)
    if _type_matches(return_type, ActionResult, include_subclasses):
        return True
    if not include_async:
        return False

    result_type = awaited_type(return_type)
    return result_type is not None and _type_matches(
        result_type, ActionResult, include_subclasses
    )


def has_action(
    controller_type: type, action_name: str, include_async: Optional[bool] = None
) -> bool:
    """Check whether a controller class has a given action.

    Args:
        controller_type: Controller class to inspect
        action_name: Action name, matched case-insensitively
        include_async: Whether async actions count; defaults to the
            ``include_async_actions`` setting

    Returns:
        True if the name resolves to an action or is ambiguous, False if it
        matches nothing, a non-action or a method with another return type

    Raises:
        TypeError: If ``controller_type`` is not a class
    """
    if include_async is None:
        include_async = get_config().include_async_actions

    try:
        method = get_method(controller_type, action_name)
    except AmbiguousMatchError as e:
        logger.debug(f"{e.message}; treating '{action_name}' as an action")
        return AMBIGUOUS_MATCH_IS_ACTION

    if method is None or method.non_action:
        return False
    return is_action_result(method, include_async=include_async)


def get_actions(
    controller_type: type, include_async: Optional[bool] = None
) -> List[str]:
    """List the action names of a controller class.

    Names follow MRO order, subclass first. Ambiguous names are listed once,
    under the first spelling found.
    """
    actions = []
    for methods in describe_methods(controller_type).values():
        name = methods[0].name
        if has_action(controller_type, name, include_async=include_async):
            actions.append(name)
    return actions


def controller_has_action(
    controller_name: str, action_name: str, include_async: Optional[bool] = None
) -> bool:
    """Check whether a registered controller, looked up by name, has an action.

    Args:
        controller_name: Class name (``HomeController``) or short name (``home``)
        action_name: Action name, matched case-insensitively
        include_async: See ``has_action``

    Returns:
        False when no controller matches, otherwise the ``has_action`` result
    """
    controller_type = find_controller(controller_name)
    if controller_type is None:
        logger.debug(f"No controller named '{controller_name}'")
        return False
    return has_action(controller_type, action_name, include_async=include_async)


__all__ = [
    "AMBIGUOUS_MATCH_IS_ACTION",
    "is_return_type_of",
    "is_action_result",
    "has_action",
    "get_actions",
    "controller_has_action",
]
