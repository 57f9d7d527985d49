"""Method metadata for controller classes.

This module reads the declared public instance methods of a class and their
declared return types. Methods are collected into a table keyed by the
casefolded method name; a key holding more than one entry is an ambiguous
name. Entries come from three places:

1. Names that differ only by case (``Save`` and ``save``)
2. ``@overload`` declarations, each overload being one declared method
3. ``@singledispatchmethod`` methods, one entry per registered implementation

Example:
    >>> class HomeController(Controller):
    ...     def index(self) -> ActionResult: ...
    >>> get_method(HomeController, "INDEX").name
    'index'
"""

import collections.abc
import functools
import inspect
import logging
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Coroutine,
    Dict,
    List,
    Optional,
    get_args,
    get_origin,
    get_type_hints,
)

from typing_extensions import get_overloads

from controller_helper.exceptions import AmbiguousMatchError

logger = logging.getLogger(__name__)

NON_ACTION_ATTR = "__non_action__"


@dataclass(frozen=True)
class MethodDescriptor:
    """A declared public instance method.

    Attributes:
        name: Method name as declared
        function: The underlying function (or overload stub)
        owner: Class whose body declares the method
        return_type: Resolved declared return type
        is_async: Whether the method is a coroutine function
        non_action: Whether the method is marked with ``@non_action``
    """

    name: str
    function: Callable[..., Any]
    owner: type
    return_type: Any
    is_async: bool = False
    non_action: bool = False

    @property
    def qualname(self) -> str:
        return f"{self.owner.__name__}.{self.name}"


def non_action(func: Callable[..., Any]) -> Callable[..., Any]:
    """Mark a public method so that it is never treated as an action."""
    setattr(func, NON_ACTION_ATTR, True)
    return func


def _resolve_annotation(annotation: Any, func: Callable[..., Any]) -> Any:
    """Evaluate a single string annotation in the globals of ``func``.

    Unresolvable annotations are returned unchanged.
    """
    if not isinstance(annotation, str):
        return annotation

    unwrapped = inspect.unwrap(func)
    try:
        return eval(annotation, getattr(unwrapped, "__globals__", {}), None)
    except (NameError, SyntaxError, TypeError) as e:
        logger.debug(f"Keeping raw return annotation {annotation!r}: {e}")
        return annotation


def get_return_type(method: Callable[..., Any]) -> Any:
    """Resolve the declared return type of a function.

    Coroutine functions declared ``async def f() -> R`` are reported as
    ``Coroutine[Any, Any, R]``.

    Args:
        method: Function, bound method or overload stub

    Returns:
        The declared return type, or ``inspect.Signature.empty`` when the
        function carries no return annotation
    """
    func = getattr(method, "__func__", method)
    annotations = getattr(func, "__annotations__", {})
    if "return" not in annotations:
        return inspect.Signature.empty

    try:
        return_type = get_type_hints(func).get("return", inspect.Signature.empty)
    except (NameError, TypeError) as e:
        # Another annotation failed; resolve the return annotation on its own
        logger.debug(f"Could not resolve annotations of {func.__qualname__}: {e}")
        return_type = _resolve_annotation(annotations["return"], func)

    if return_type is None:
        return_type = type(None)

    if inspect.iscoroutinefunction(func):
        return Coroutine[Any, Any, return_type]
    return return_type


def awaited_type(tp: Any) -> Optional[Any]:
    """Return ``R`` for an awaitable type such as ``Awaitable[R]``, else ``None``.

    Recognizes ``Awaitable``, ``Coroutine``, ``asyncio.Future`` and
    ``asyncio.Task`` parameterizations.
    """
    origin = get_origin(tp)
    if not inspect.isclass(origin) or not issubclass(origin, collections.abc.Awaitable):
        return None

    args = get_args(tp)
    if not args:
        return None
    # Coroutine[Y, S, R] carries its result last
    return args[-1]


def _method_function(attr: Any) -> Optional[Callable[..., Any]]:
    """Return the plain function behind a class attribute, or None."""
    if isinstance(attr, functools.singledispatchmethod):
        attr = attr.func
    return attr if inspect.isfunction(attr) else None


def _declared_functions(attr: Any) -> List[Callable[..., Any]]:
    if isinstance(attr, functools.singledispatchmethod):
        # The object entry is the undispatched fallback, not an overload
        implementations = [
            func
            for dispatch_type, func in attr.dispatcher.registry.items()
            if dispatch_type is not object
        ]
        return implementations or [attr.func]

    overloads = get_overloads(attr)
    if overloads:
        return list(overloads)
    return [attr]


def describe_methods(cls: type) -> Dict[str, List[MethodDescriptor]]:
    """Build the method table of a class.

    Walks the MRO so that inherited methods are included; a name defined on a
    subclass hides the same name on its bases. Private names, static and
    class methods and non-function attributes are skipped.
    ``singledispatchmethod`` attributes contribute one entry per registered
    implementation.

    Args:
        cls: Class to describe

    Returns:
        Mapping of casefolded method name to its declared methods

    Raises:
        TypeError: If ``cls`` is not a class
    """
    if not inspect.isclass(cls):
        raise TypeError(f"Expected a class, got {type(cls).__name__}")

    table: Dict[str, List[MethodDescriptor]] = {}
    seen = set()

    for klass in cls.__mro__:
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)

            base = _method_function(attr)
            if name.startswith("_") or base is None:
                continue
            marked = getattr(attr, NON_ACTION_ATTR, False) or getattr(
                base, NON_ACTION_ATTR, False
            )

            for func in _declared_functions(attr):
                descriptor = MethodDescriptor(
                    name=name,
                    function=func,
                    owner=klass,
                    return_type=get_return_type(func),
                    is_async=inspect.iscoroutinefunction(func),
                    non_action=marked,
                )
                table.setdefault(name.casefold(), []).append(descriptor)

    return table


def find_methods(cls: type, name: str) -> List[MethodDescriptor]:
    """Find every public instance method matching ``name``, ignoring case."""
    return describe_methods(cls).get(name.casefold(), [])


def get_method(cls: type, name: str) -> Optional[MethodDescriptor]:
    """Get the single public instance method matching ``name``.

    Args:
        cls: Class to search
        name: Method name, matched case-insensitively

    Returns:
        The matching method, or None if nothing matches

    Raises:
        AmbiguousMatchError: If more than one method matches
        TypeError: If ``cls`` is not a class
    """
    matches = find_methods(cls, name)
    if len(matches) > 1:
        raise AmbiguousMatchError(cls, name, [m.qualname for m in matches])
    return matches[0] if matches else None


__all__ = [
    "NON_ACTION_ATTR",
    "MethodDescriptor",
    "non_action",
    "get_return_type",
    "awaited_type",
    "describe_methods",
    "find_methods",
    "get_method",
]
