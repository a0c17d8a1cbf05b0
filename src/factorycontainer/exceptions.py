"""Exceptions raised by the container.

Mirrors the PSR-11 split between "nothing is bound here" and "something is
bound but could not be produced".
"""

from typing import Optional


class ContainerError(Exception):
    """Base class for all container errors.
    
    Attributes:
        identifier: The identifier being resolved when the error occurred.
    """
    
    def __init__(self, message: str, identifier: Optional[str] = None):
        super().__init__(message)
        self.identifier = identifier


class NotFoundError(ContainerError, LookupError):
    """No binding exists and the identifier is not an instantiable type."""
    
    def __init__(self, identifier: str):
        super().__init__(f'Identifier "{identifier}" is not binding.', identifier)


class ResolutionError(ContainerError):
    """The identifier names an instantiable type but construction failed."""
    
    def __init__(self, identifier: str):
        super().__init__(f'Error retrieving "{identifier}"', identifier)


class IntrospectionError(ContainerError):
    """A type descriptor could not inspect the requested type."""
