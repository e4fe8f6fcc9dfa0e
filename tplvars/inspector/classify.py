"""Value classification for the inspector walk.

Every value falls into exactly one ValueKind. Classification only looks at
types and instance dictionaries: it never iterates, calls or otherwise
touches the inspected value, so iterators and generators are left intact.
"""

import collections.abc
import enum
import functools
import io
import logging
import socket
import subprocess
import types
from typing import Any, Optional

from .schemas import ValueKind

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes, bytearray, memoryview)

_COLLECTION_ABCS = (collections.abc.Mapping, collections.abc.Sequence, collections.abc.Set)

_RESOURCE_KINDS: tuple[tuple[type, str], ...] = (
    (io.IOBase, "stream"),
    (socket.socket, "socket"),
    (subprocess.Popen, "process"),
)

_CALLABLE_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
    functools.partial,
)

# Names used for the type annotation of common builtins
_DEBUG_TYPE_NAMES: dict[type, str] = {
    type(None): "null",
    bool: "bool",
    int: "int",
    float: "float",
    str: "string",
    list: "array",
    dict: "array",
}


def resource_kind(value: Any) -> Optional[str]:
    """Kind of an I/O handle, or None when value is not one."""
    for resource_type, kind in _RESOURCE_KINDS:
        if isinstance(value, resource_type):
            return kind
    return None


def _instance_dict(value: Any) -> Optional[dict[str, Any]]:
    try:
        return vars(value)
    except TypeError:
        return None


def classify_value(value: Any) -> ValueKind:
    """Classify a value for rendering."""
    if isinstance(value, _SCALAR_TYPES) or isinstance(value, (enum.Enum, type)):
        return ValueKind.LEAF
    if resource_kind(value) is not None:
        return ValueKind.LEAF
    if isinstance(value, _COLLECTION_ABCS):
        return ValueKind.COLLECTION
    if isinstance(value, _CALLABLE_TYPES):
        return ValueKind.CALLABLE
    if _instance_dict(value) is not None:
        return ValueKind.COMPOSITE
    return ValueKind.LEAF


def callable_kind(value: Any) -> str:
    """Return "function", "method" or "closure" for a callable value."""
    if isinstance(value, (types.MethodType, types.MethodWrapperType)):
        return "method"
    if isinstance(value, types.BuiltinFunctionType):
        owner = getattr(value, "__self__", None)
        if owner is None or isinstance(owner, types.ModuleType):
            return "function"
        return "method"
    if isinstance(value, types.FunctionType):
        if value.__name__ == "<lambda>" or value.__closure__:
            return "closure"
        return "function"
    if isinstance(value, functools.partial):
        return "closure"
    # Unbound descriptors such as str.upper
    return "function"


def qualified_name(cls: type) -> str:
    module = getattr(cls, "__module__", None)
    if module and module != "builtins":
        return f"{module}.{cls.__qualname__}"
    return cls.__qualname__


def type_label(value: Any) -> str:
    """Type annotation shown next to a rendered value."""
    kind = resource_kind(value)
    if kind is not None:
        return f"resource ({kind})"
    cls = type(value)
    return _DEBUG_TYPE_NAMES.get(cls) or qualified_name(cls)


def leaf_text(value: Any) -> str:
    """Text form of a leaf value (not yet escaped)."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    kind = resource_kind(value)
    if kind is not None:
        return f"resource({kind})"
    try:
        return str(value)
    except Exception as e:
        logger.warning(f"Failed to convert {qualified_name(type(value))} to text: {e}")
        return f"<unprintable {qualified_name(type(value))}>"


def composite_members(value: Any) -> list[tuple[str, Any]]:
    """Public instance attributes of a composite, in definition order."""
    members = _instance_dict(value) or {}
    return [(key, member) for key, member in list(members.items()) if not str(key).startswith("_")]


def collection_elements(value: Any) -> list[tuple[Any, Any]]:
    """(key, element) pairs of a collection, in iteration order."""
    if isinstance(value, collections.abc.Mapping):
        return list(value.items())
    return list(enumerate(value))
