"""Global controller registry.

Controller subclasses register themselves here when their class statement
runs, so the set of controllers is known without scanning loaded modules.
The registry keeps definition order and is guarded by a lock. It holds weak
references only: a controller class that is garbage collected, such as one
defined in a function scope, drops out of the registry.
"""

import logging
import threading
import weakref
from typing import List, Optional

from controller_helper.exceptions import ControllerNotFoundError

# Thread-safe global registry
_controllers: List["weakref.ref[type]"] = []
_registry_lock = threading.Lock()
_logger = logging.getLogger(__name__)

CONTROLLER_SUFFIX = "Controller"


def _live_controllers() -> List[type]:
    """Drop collected classes and return the live ones. Caller holds the lock."""
    live = []
    alive_refs = []
    for ref in _controllers:
        controller_type = ref()
        if controller_type is not None:
            live.append(controller_type)
            alive_refs.append(ref)
    _controllers[:] = alive_refs
    return live


def register_controller(controller_type: type) -> None:
    """Register a controller class.

    Registering the same class twice is a no-op.

    Args:
        controller_type: The controller class to register
    """
    with _registry_lock:
        if controller_type in _live_controllers():
            return
        _controllers.append(weakref.ref(controller_type))
        _logger.debug(
            f"Registered controller: {controller_type.__module__}."
            f"{controller_type.__qualname__}"
        )


def unregister_controller(controller_type: type) -> bool:
    """Remove a controller class from the registry.

    Returns:
        True if the class was registered, False otherwise
    """
    with _registry_lock:
        live = _live_controllers()
        if controller_type not in live:
            return False
        del _controllers[live.index(controller_type)]
        _logger.debug(f"Unregistered controller: {controller_type.__qualname__}")
        return True


def get_controllers() -> List[type]:
    """Get all live registered controller classes in registration order."""
    with _registry_lock:
        return _live_controllers()


def get_controller_names() -> List[str]:
    """Get the names of all registered controllers.

    Returns:
        A list of controller class names, as enumerated by the registry
    """
    return [controller_type.__name__ for controller_type in get_controllers()]


def get_controller_count() -> int:
    """Get the number of live registered controllers.

    This is useful for debugging and testing.
    """
    with _registry_lock:
        return len(_live_controllers())


def clear_controllers() -> None:
    """Clear all controllers from the registry.

    This is primarily useful for testing. Controllers defined afterwards
    register as usual; controllers cleared here are not re-registered.
    Collected classes leave the registry on their own, so clearing is not
    needed to release them.
    """
    with _registry_lock:
        count = len(_live_controllers())
        _controllers.clear()
        _logger.debug(f"Cleared {count} controller(s) from registry")


def _short_name(name: str) -> str:
    if name.endswith(CONTROLLER_SUFFIX) and name != CONTROLLER_SUFFIX:
        return name[: -len(CONTROLLER_SUFFIX)]
    return name


def find_controller(name: str) -> Optional[type]:
    """Find a registered controller by name.

    Both the class name (``HomeController``) and the short route-style name
    (``home``) resolve, case-insensitively. The first registered match wins.

    Args:
        name: Controller name

    Returns:
        The controller class, or None if nothing matches
    """
    wanted = name.casefold()
    for controller_type in get_controllers():
        class_name = controller_type.__name__
        if wanted in (class_name.casefold(), _short_name(class_name).casefold()):
            return controller_type
    return None


def get_controller(name: str) -> type:
    """Get a registered controller by name.

    Raises:
        ControllerNotFoundError: If no registered controller matches
    """
    controller_type = find_controller(name)
    if controller_type is None:
        raise ControllerNotFoundError(name)
    return controller_type


__all__ = [
    "CONTROLLER_SUFFIX",
    "register_controller",
    "unregister_controller",
    "get_controllers",
    "get_controller_names",
    "get_controller_count",
    "clear_controllers",
    "find_controller",
    "get_controller",
]
