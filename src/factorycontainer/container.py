"""Factory container: a small service locator.

Not supported: autowiring. Unbound identifiers are only resolved by
treating them as a class path and feeding the constructor from explicitly
registered named parameters.
"""

import logging
from enum import Enum
from typing import Any, Callable, Optional, TYPE_CHECKING

from .exceptions import IntrospectionError, NotFoundError, ResolutionError
from .interfaces import ContainerInterface, Invokable, ServiceModule, TypeDescriptor
from .introspection import ImportTypeDescriptor

if TYPE_CHECKING:
    from .config import ContainerConfig

logger = logging.getLogger(__name__)

Factory = Callable[["FactoryContainer"], Any]


class Scope(Enum):
    """Lifecycle of a binding."""
    PROTOTYPE = 0  # Factory invoked on every get()
    SINGLETON = 1  # Factory invoked once, result cached until flush()


class FactoryContainer(ContainerInterface):
    """Light weight service locator container.
    
    Registrations are accepted until ``lock_module()`` runs the registered
    service modules and locks the registry. While locked, ``set``,
    ``parameters``, ``remove`` and ``register`` are silently ignored.
    ``flush()`` drops bindings and unlocks again; named parameters and
    modules are kept.
    
    Usage:
        container = FactoryContainer()
        container.set("config", lambda c: load_config(), Scope.SINGLETON)
        container.parameters("app.mail.Mailer", "host", lambda c: c.get("config").host)
        container.register(StorageModule)
        container.lock_module()
        
        mailer = container.get("app.mail.Mailer")
    """
    
    def __init__(self, type_descriptor: Optional[TypeDescriptor] = None):
        self._type_descriptor = type_descriptor or ImportTypeDescriptor()
        self._bindings: dict[str, Factory] = {}
        self._scopes: dict[str, Scope] = {}
        self._parameters: dict[str, dict[str, Factory]] = {}
        self._modules: list[type[ServiceModule]] = []
        self._shared: dict[str, Any] = {}
        self._locked = False
    
    @classmethod
    def from_config(
        cls,
        config: "ContainerConfig",
        type_descriptor: Optional[TypeDescriptor] = None,
    ) -> "FactoryContainer":
        """Build a container with the configured modules registered.
        
        The container is locked afterwards when ``config.lock`` is set.
        
        Raises:
            ValueError: If a configured module path is invalid.
        """
        config.apply_logging()
        container = cls(type_descriptor=type_descriptor)
        for module_type in config.load_modules():
            container.register(module_type)
        if config.lock:
            container.lock_module()
        return container
    
    @property
    def locked(self) -> bool:
        return self._locked
    
    def _ignored(self, operation: str, id: str) -> bool:
        if self._locked:
            logger.debug(f"Container locked, ignoring {operation}({id!r})")
        return self._locked
    
    def set(self, id: str, factory: Factory, scope: Scope = Scope.PROTOTYPE) -> None:
        """Bind ``factory`` to ``id``, replacing any previous binding."""
        if self._ignored("set", id):
            return
        self._bindings[id] = factory
        self._scopes[id] = scope
        logger.debug(f"Bound {id!r} ({scope.name})")
    
    def parameters(self, id: str, name: str, factory: Factory) -> None:
        """Supply constructor parameter ``name`` when ``id`` is built reflectively."""
        if self._ignored("parameters", id):
            return
        self._parameters.setdefault(id, {})[name] = factory
        logger.debug(f"Registered parameter {name!r} for {id!r}")
    
    def register(self, module_type: type[ServiceModule]) -> None:
        """Queue a service module to be applied by ``lock_module()``."""
        if self._ignored("register", getattr(module_type, "__name__", repr(module_type))):
            return
        self._modules.append(module_type)
    
    def remove(self, id: str) -> None:
        if self._ignored("remove", id):
            return
        self._bindings.pop(id, None)
        self._scopes.pop(id, None)
    
    def lock_module(self) -> None:
        """Apply every registered module in order, then lock the registry.
        
        Not guarded against repeat calls: each call re-applies all modules.
        An exception from a module propagates and leaves the container
        unlocked; registrations made by earlier modules are kept.
        """
        # Modules may register further modules while being applied
        index = 0
        while index < len(self._modules):
            module_type = self._modules[index]
            logger.debug(f"Applying module {module_type.__name__}")
            module_type().provide(self)
            index += 1
        self._locked = True
        logger.info(f"Container locked with {len(self._bindings)} bindings")
    
    def flush(self) -> None:
        """Clear bindings, scopes and cached singletons, and unlock."""
        self._bindings.clear()
        self._scopes.clear()
        self._shared.clear()
        self._locked = False
        logger.info("Container flushed")
    
    def has(self, id: str) -> bool:
        return id in self._bindings
    
    def __contains__(self, id: str) -> bool:
        return self.has(id)
    
    def get(self, id: str) -> Any:
        """Resolve ``id``.
        
        Bound identifiers are served from their factory according to their
        scope. Anything else is treated as a class path and constructed with
        the named parameters registered for it.
        
        Raises:
            NotFoundError: Unbound and not an instantiable type.
            ResolutionError: The type exists but constructing it failed.
        """
        if self.has(id):
            if self._scopes.get(id) is Scope.SINGLETON:
                return self._shared_instance(id)
            return self._bindings[id](self)
        
        try:
            if not self._type_descriptor.is_instantiable(id):
                raise NotFoundError(id)
            names = self._type_descriptor.constructor_parameters(id)
        except IntrospectionError as e:
            raise NotFoundError(id) from e
        
        arguments = self._resolve_constructor_parameters(id, names)
        logger.debug(f"Instantiating {id!r} with {len(arguments)} argument(s)")
        try:
            return self._type_descriptor.instantiate(id, arguments)
        except Exception as e:
            raise ResolutionError(id) from e
    
    def _shared_instance(self, id: str) -> Any:
        if id not in self._shared:
            self._shared[id] = self._bindings[id](self)
        return self._shared[id]
    
    def _resolve_constructor_parameters(self, id: str, names: list[str]) -> list[Any]:
        registered = self._parameters.get(id)
        if not registered:
            return []
        # Unmatched names are skipped; argument count is left to the constructor
        return [registered[name](self) for name in names if name in registered]
    
    def bindings(self) -> dict[str, Factory]:
        """Return the live binding registry (not a copy)."""
        return self._bindings
    
    def callable(self, invokable: Invokable) -> Any:
        return invokable.proceed()
