"""Runtime introspection used by the feature probe"""
import builtins
import importlib
import importlib.metadata
import importlib.util
import os
import platform
from abc import ABC, abstractmethod
from typing import Any, Optional
import logging

logger = logging.getLogger(__name__)


class RuntimeIntrospector(ABC):
    """Narrow set of read-only queries against the host runtime"""

    @abstractmethod
    def os_name(self) -> str:
        """Host operating system name"""

    @abstractmethod
    def getenv(self, name: str) -> Optional[str]:
        """Value of an environment variable, None if unset"""

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Check if path exists as a file"""

    @abstractmethod
    def has_module(self, name: str) -> bool:
        """Check if a module can be located by name"""

    @abstractmethod
    def module_version(self, name: str) -> Optional[str]:
        """Version string of a module, None if it has none"""

    @abstractmethod
    def resolve_attribute(self, dotted_name: str) -> Optional[Any]:
        """Resolve a builtin or dotted module attribute, None if missing"""


class HostRuntime(RuntimeIntrospector):
    """Introspector backed by the running interpreter and filesystem"""

    def os_name(self) -> str:
        return platform.system()

    def getenv(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def has_module(self, name: str) -> bool:
        try:
            return importlib.util.find_spec(name) is not None
        except Exception as e:
            # find_spec imports parent packages of dotted names, which may fail in any way
            logger.debug(f"Module lookup for {name} failed: {e}")
            return False

    def module_version(self, name: str) -> Optional[str]:
        """Distribution metadata first, then the module's __version__"""
        top_level = name.split(".")[0]
        try:
            return importlib.metadata.version(top_level)
        except importlib.metadata.PackageNotFoundError:
            pass

        try:
            module = importlib.import_module(name)
        except Exception as e:
            logger.debug(f"Could not import {name} for version lookup: {e}")
            return None

        version = getattr(module, "__version__", None)
        return str(version) if version is not None else None

    def resolve_attribute(self, dotted_name: str) -> Optional[Any]:
        if not dotted_name:
            return None

        if "." not in dotted_name:
            return getattr(builtins, dotted_name, None)

        # Longest importable module prefix, then walk the remaining attributes
        parts = dotted_name.split(".")
        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            if not self.has_module(module_name):
                continue
            try:
                target = importlib.import_module(module_name)
            except Exception as e:
                logger.debug(f"Could not import {module_name}: {e}")
                continue

            for attribute in parts[split:]:
                target = getattr(target, attribute, None)
                if target is None:
                    return None
            return target

        return None
