"""Container configuration.

Lets an application list its service modules in a YAML file or the
environment instead of registering them in code:

    # container.yaml
    modules:
      - myapp.modules.StorageModule
      - myapp.modules.MailModule
    lock: true
    debug: false
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .interfaces import ServiceModule
from .introspection import load_type

PACKAGE_LOGGER = "factorycontainer"


@dataclass
class ContainerConfig:
    """Configuration for building a container.
    
    Attributes:
        modules: Dotted paths of ServiceModule subclasses, applied in order
        lock: Lock the container once the modules are registered
        debug: Enable debug logging for the container package
    """
    modules: list[str] = field(default_factory=list)
    lock: bool = True
    debug: bool = False
    
    def __post_init__(self):
        if isinstance(self.modules, str):
            raise ValueError("modules must be a list of dotted paths, not a string")
        self.modules = [m.strip() for m in self.modules if m and m.strip()]
        if not isinstance(self.lock, bool):
            raise ValueError(f"lock must be true or false, got {self.lock!r}")
        if not isinstance(self.debug, bool):
            raise ValueError(f"debug must be true or false, got {self.debug!r}")
    
    @classmethod
    def from_dict(cls, data: dict) -> "ContainerConfig":
        """Create configuration from dictionary."""
        unknown = set(data) - {"modules", "lock", "debug"}
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(
            modules=list(data.get("modules") or []),
            lock=data.get("lock", True),
            debug=data.get("debug", False),
        )
    
    @classmethod
    def from_file(cls, path: str | Path) -> "ContainerConfig":
        """Load configuration from YAML file.
        
        A missing file yields the default configuration.
        """
        path = Path(path).expanduser()
        if not path.exists():
            return cls()
        
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")
        return cls.from_dict(data)
    
    @classmethod
    def from_env(cls, prefix: str = "FACTORY_CONTAINER") -> "ContainerConfig":
        """Load configuration from environment variables.
        
        Environment variables:
            {prefix}_CONFIG: Path to a YAML file loaded first
            {prefix}_MODULES: Comma separated module paths (overrides file)
            {prefix}_DEBUG: true|false (overrides file)
        """
        def get(key: str, default: Optional[str] = None) -> Optional[str]:
            return os.environ.get(f"{prefix}_{key}", default)
        
        config_path = get("CONFIG")
        config = cls.from_file(config_path) if config_path else cls()
        
        modules = get("MODULES")
        if modules is not None:
            config.modules = [m.strip() for m in modules.split(",") if m.strip()]
        
        debug = get("DEBUG")
        if debug is not None:
            config.debug = debug.lower() in ("true", "1", "yes")
        
        return config
    
    def load_modules(self) -> list[type[ServiceModule]]:
        """Import the configured module classes.
        
        Raises:
            ValueError: If a path does not name a ServiceModule subclass.
        """
        errors = self.validate()
        if errors:
            raise ValueError("; ".join(errors))
        return [load_type(path) for path in self.modules]
    
    def apply_logging(self) -> None:
        if self.debug:
            logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)
    
    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        
        for path in self.modules:
            try:
                target = load_type(path)
            except Exception as e:
                errors.append(f"module {path!r} cannot be imported: {e}")
                continue
            if not (isinstance(target, type) and issubclass(target, ServiceModule)):
                errors.append(f"module {path!r} is not a ServiceModule subclass")
        
        return errors
