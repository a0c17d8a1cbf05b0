"""Type descriptors backing the container's reflective fallback."""

import importlib
import inspect
import logging
from typing import Any, Callable, Optional, Sequence

from .exceptions import IntrospectionError
from .interfaces import TypeDescriptor

logger = logging.getLogger(__name__)

# Parameter kinds that cannot be filled from a named-parameter lookup
_VARIADIC_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def type_path(cls: type) -> str:
    """Return the dotted path ``load_type`` resolves back to ``cls``."""
    return f"{cls.__module__}.{cls.__qualname__}"


def load_type(type_id: str) -> Any:
    """Import the object named by a dotted path.
    
    Accepts ``"pkg.module.Name"`` and ``"pkg.module:Name"``. Nested names
    (``"pkg.module:Outer.Inner"``) are followed attribute by attribute.
    
    Raises:
        ImportError: If no module/attribute pair matches the path.
    """
    if ":" in type_id:
        module_name, _, qualname = type_id.partition(":")
        module = importlib.import_module(module_name)
        return _follow(module, qualname, type_id)
    
    parts = type_id.split(".")
    # Try the longest importable module prefix first
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            module = importlib.import_module(module_name)
        except (ImportError, TypeError):
            # Relative-looking prefixes such as ".." raise TypeError
            continue
        try:
            return _follow(module, ".".join(parts[split:]), type_id)
        except ImportError:
            continue
    raise ImportError(f"Cannot import {type_id!r}")


def _follow(obj: Any, qualname: str, type_id: str) -> Any:
    for attr in qualname.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError:
            raise ImportError(f"Cannot import {type_id!r}") from None
    return obj


def _is_concrete_class(target: Any) -> bool:
    if not inspect.isclass(target):
        return False
    if inspect.isabstract(target):
        return False
    if getattr(target, "_is_protocol", False):
        return False
    return True


def _signature_names(target: Any) -> list[str]:
    signature = inspect.signature(target)
    return [
        name for name, param in signature.parameters.items()
        if param.kind not in _VARIADIC_KINDS
    ]


class ImportTypeDescriptor(TypeDescriptor):
    """Resolves identifiers as importable dotted paths.
    
    Classes whose signature cannot be read (some builtins and C extension
    types) are treated as having no constructor parameters.
    """
    
    def _load(self, type_id: str) -> Any:
        try:
            return load_type(type_id)
        except Exception as e:
            # Import-time failures of the target module count as not found
            raise IntrospectionError(
                f"Cannot load type {type_id!r}: {e}", type_id
            ) from e
    
    def is_instantiable(self, type_id: str) -> bool:
        try:
            target = self._load(type_id)
        except IntrospectionError:
            logger.debug(f"Type {type_id!r} could not be loaded")
            return False
        return _is_concrete_class(target)
    
    def constructor_parameters(self, type_id: str) -> list[str]:
        target = self._load(type_id)
        try:
            return _signature_names(target)
        except ValueError:
            # No introspectable constructor
            return []
        except TypeError as e:
            raise IntrospectionError(
                f"Cannot inspect constructor of {type_id!r}: {e}", type_id
            ) from e
    
    def instantiate(self, type_id: str, args: Sequence[Any]) -> Any:
        return self._load(type_id)(*args)


class TableTypeDescriptor(TypeDescriptor):
    """Type descriptor driven by a pre-generated registration table.
    
    Maps identifiers to a constructor and its ordered parameter names, so the
    fallback path works without importing or inspecting anything.
    
    Usage:
        types = TableTypeDescriptor()
        types.add("clock", SystemClock)
        types.add("mailer", Mailer, ["host", "port"])
        container = FactoryContainer(type_descriptor=types)
    """
    
    def __init__(self, table: Optional[dict[str, tuple[Callable[..., Any], list[str]]]] = None):
        self._table: dict[str, tuple[Callable[..., Any], list[str]]] = dict(table or {})
    
    def add(
        self,
        type_id: str,
        constructor: Callable[..., Any],
        parameters: Optional[list[str]] = None,
    ) -> None:
        """Add or replace the entry for ``type_id``.
        
        When ``parameters`` is omitted they are read from the constructor's
        signature once, at registration time.
        """
        if parameters is None:
            try:
                parameters = _signature_names(constructor)
            except (TypeError, ValueError):
                parameters = []
        self._table[type_id] = (constructor, list(parameters))
    
    def is_instantiable(self, type_id: str) -> bool:
        return type_id in self._table
    
    def constructor_parameters(self, type_id: str) -> list[str]:
        try:
            return list(self._table[type_id][1])
        except KeyError:
            raise IntrospectionError(f"Unknown type {type_id!r}", type_id) from None
    
    def instantiate(self, type_id: str, args: Sequence[Any]) -> Any:
        try:
            constructor = self._table[type_id][0]
        except KeyError:
            raise IntrospectionError(f"Unknown type {type_id!r}", type_id) from None
        return constructor(*args)
