"""Core interfaces for the factory container.

These define the contracts between the container and the code plugged into
it: service modules applied at lock time, invokables forwarded by
``callable()``, and the type descriptor backing the reflective fallback.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .container import FactoryContainer


class ContainerInterface(ABC):
    """Read side of a service container."""
    
    @abstractmethod
    def get(self, id: str) -> Any:
        """Find an entry of the container by its identifier and return it.
        
        Raises:
            NotFoundError: No entry was found for this identifier.
            ContainerError: Error while retrieving the entry.
        """
        pass
    
    @abstractmethod
    def has(self, id: str) -> bool:
        """Return True if the container holds a binding for the identifier.
        
        ``has(id)`` returning True does not mean ``get(id)`` cannot raise,
        only that it will not raise ``NotFoundError``.
        """
        pass


class ServiceModule(ABC):
    """A bundle of registrations applied when the container is locked.
    
    Modules are registered by class and constructed with no arguments.
    ``provide`` may call ``set``, ``parameters`` and ``register`` on the
    container it receives.
    
    Usage:
        class StorageModule(ServiceModule):
            def provide(self, container):
                container.set("storage", lambda c: InMemoryStorage())
        
        container.register(StorageModule)
        container.lock_module()
    """
    
    @abstractmethod
    def provide(self, container: "FactoryContainer") -> None:
        """Register this module's bindings on the container."""
        pass


class Invokable(ABC):
    """Anything exposing a zero-argument ``proceed`` operation."""
    
    @abstractmethod
    def proceed(self) -> Any:
        pass


class TypeDescriptor(ABC):
    """Reflective view of the types the container may instantiate.
    
    The container only needs three answers from the environment: whether an
    identifier names something it can construct, which parameter names the
    constructor takes (in declaration order), and a way to construct it from
    a positional argument list.
    """
    
    @abstractmethod
    def is_instantiable(self, type_id: str) -> bool:
        """Return True if ``type_id`` names a concrete, constructible type.
        
        Missing, abstract and non-class targets all report False.
        """
        pass
    
    @abstractmethod
    def constructor_parameters(self, type_id: str) -> list[str]:
        """Return the constructor's parameter names in declaration order.
        
        Raises:
            IntrospectionError: If the constructor cannot be inspected.
        """
        pass
    
    @abstractmethod
    def instantiate(self, type_id: str, args: Sequence[Any]) -> Any:
        """Construct ``type_id`` with ``args`` passed positionally."""
        pass
