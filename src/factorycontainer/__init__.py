"""Factory container: a minimal service locator.

Register factories under string identifiers, resolve them by identifier:

    from factorycontainer import FactoryContainer, Scope
    
    container = FactoryContainer()
    container.set("clock", lambda c: SystemClock(), Scope.SINGLETON)
    container.lock_module()
    
    clock = container.get("clock")

Unbound identifiers are treated as class paths and constructed with the
named parameters registered through ``container.parameters()``.
"""

from .config import ContainerConfig
from .container import FactoryContainer, Scope
from .exceptions import ContainerError, IntrospectionError, NotFoundError, ResolutionError
from .interfaces import ContainerInterface, Invokable, ServiceModule, TypeDescriptor
from .introspection import ImportTypeDescriptor, TableTypeDescriptor, load_type, type_path

__all__ = [
    "FactoryContainer",
    "Scope",
    "ContainerConfig",
    "ContainerInterface",
    "ServiceModule",
    "Invokable",
    "TypeDescriptor",
    "ImportTypeDescriptor",
    "TableTypeDescriptor",
    "ContainerError",
    "NotFoundError",
    "ResolutionError",
    "IntrospectionError",
    "load_type",
    "type_path",
]
