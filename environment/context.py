"""Feature probe: capability queries against the host with a memoized cache"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple, Union
from config import Config
from logging_config import get_logger
from utils.executables import resolve_executable_path
from utils.version import version_at_least
from .capabilities import HostRuntime, RuntimeIntrospector
from .detection import OsClassification, classify_os

logger = get_logger(__name__)


class _Unresolved:
    """Marker for a cache slot that has not been probed yet"""

    def __repr__(self) -> str:
        return "<unresolved>"


UNRESOLVED = _Unresolved()

CacheSlot = Union[_Unresolved, Optional[str]]


@dataclass
class ProbeCache:
    """Per-probe memo of resolved values, never invalidated"""
    image_convert_path: CacheSlot = UNRESOLVED
    image_identify_path: CacheSlot = UNRESOLVED
    os_classification: Union[_Unresolved, OsClassification] = UNRESOLVED


class FeatureProbe:
    """Answers capability questions about the host runtime"""

    def __init__(self, config: Optional[Config] = None,
                 runtime: Optional[RuntimeIntrospector] = None,
                 cache: Optional[ProbeCache] = None):
        self.config = config or Config()
        self.runtime = runtime or HostRuntime()
        self.cache = cache or ProbeCache()

    # Filesystem and user support

    def supports_hard_link(self) -> bool:
        """Check if hard links can be created"""
        return self.has_function("os.link")

    def supports_link(self) -> bool:
        return self.supports_hard_link()

    def supports_sym_link(self) -> bool:
        """Check if symbolic links can be created"""
        return self.has_function("os.symlink")

    def supports_user_id(self) -> bool:
        """Check if POSIX user ids can be looked up"""
        return self.has_function("pwd.getpwuid")

    # Modules and callables

    def has_extension_support(self, name: str, min_version: Optional[str] = None) -> bool:
        """
        Check if an optional module is available.

        With min_version, the module's version must also be at least that
        version under dotted comparison. A module without a discoverable
        version never satisfies a version floor.
        """
        if not self.runtime.has_module(name):
            return False
        if min_version is None:
            return True

        version = self.runtime.module_version(name)
        if version is None:
            logger.debug("Module has no version", module=name, min_version=min_version)
            return False
        return version_at_least(version, min_version)

    def has_function(self, name: str) -> bool:
        """Check if a builtin or dotted module attribute is callable"""
        return callable(self.runtime.resolve_attribute(name))

    # ImageMagick executables

    def has_image_convert(self) -> bool:
        return bool(self.get_image_convert_executable())

    def get_image_convert_executable(self) -> Optional[str]:
        """
        Path of the ImageMagick convert utility.

        On Linux, Unix,... something like /usr/bin/convert.
        On Windows something like C:\\Windows\\System32\\convert.
        """
        if self.cache.image_convert_path is UNRESOLVED:
            self.cache.image_convert_path = self.resolve_executable_path(
                self.config.convert_executable
            )
            logger.debug("Resolved convert executable", path=self.cache.image_convert_path)
        return self.cache.image_convert_path

    def has_image_identify(self) -> bool:
        return bool(self.get_image_identify_executable())

    def get_image_identify_executable(self) -> Optional[str]:
        """Path of the ImageMagick identify utility, same rules as convert"""
        if self.cache.image_identify_path is UNRESOLVED:
            self.cache.image_identify_path = self.resolve_executable_path(
                self.config.identify_executable
            )
            logger.debug("Resolved identify executable", path=self.cache.image_identify_path)
        return self.cache.image_identify_path

    # Operating system

    def os_classification(self) -> OsClassification:
        """Classify the host OS once and reuse the result"""
        if self.cache.os_classification is UNRESOLVED:
            self.cache.os_classification = classify_os(self.runtime.os_name())
            logger.debug("Classified operating system",
                         os=str(self.cache.os_classification),
                         family=self.cache.os_classification.family.value)
        return self.cache.os_classification

    def resolve_executable_path(self, file_name: str) -> Optional[str]:
        """Search the configured PATH-like variable for file_name"""
        classification = self.os_classification()
        return resolve_executable_path(
            file_name,
            unix_like=classification.is_unix_like,
            windows=classification.is_windows,
            path_value=self.runtime.getenv(self.config.path_variable),
            is_file=self.runtime.is_file,
        )

    # Reporting

    def report(self, extensions: Iterable[Tuple[str, Optional[str]]] = ()) -> Dict[str, Any]:
        """Snapshot of every probe, plus the requested extensions"""
        extension_support = {}
        for name, min_version in extensions:
            key = f"{name}>={min_version}" if min_version else name
            extension_support[key] = self.has_extension_support(name, min_version)

        return {
            "os": str(self.os_classification()),
            "supports_user_id": self.supports_user_id(),
            "supports_sym_link": self.supports_sym_link(),
            "supports_hard_link": self.supports_hard_link(),
            "has_image_identify": self.has_image_identify(),
            "image_identify_path": self.get_image_identify_executable(),
            "has_image_convert": self.has_image_convert(),
            "image_convert_path": self.get_image_convert_executable(),
            "extensions": extension_support,
        }


_feature_probe: Optional[FeatureProbe] = None


def get_feature_probe() -> FeatureProbe:
    """Shared probe for the process, configured on first use"""
    global _feature_probe
    if _feature_probe is None:
        _feature_probe = FeatureProbe()
    return _feature_probe
