"""Operating system classification for feature probing"""
from dataclasses import dataclass
from enum import Enum


class OsFamily(Enum):
    """Operating system families the probe distinguishes"""
    WINDOWS = "Windows"
    MAC = "Mac"
    LINUX = "Linux"
    FREEBSD = "FreeBSD"
    OTHER = "Other"


# Unrecognized names that still follow Unix executable lookup rules
UNIX_FALLBACK_NAMES = {"unix", "macos", "darwin"}


@dataclass(frozen=True)
class OsClassification:
    """Result of classifying a host OS name"""
    family: OsFamily
    name: str

    @property
    def is_windows(self) -> bool:
        return self.family == OsFamily.WINDOWS

    @property
    def is_unix_like(self) -> bool:
        """Check if executables are looked up with Unix rules"""
        if self.family in (OsFamily.MAC, OsFamily.LINUX, OsFamily.FREEBSD):
            return True
        return self.family == OsFamily.OTHER and self.name.lower() in UNIX_FALLBACK_NAMES

    def __str__(self) -> str:
        return self.name


def classify_os(os_name: str) -> OsClassification:
    """
    Classify a host OS name such as platform.system() returns it.

    Matching is case-insensitive. Names that match no known family are kept
    verbatim in an OTHER classification.
    """
    lowered = (os_name or "").lower()

    if lowered.startswith("windows"):
        family = OsFamily.WINDOWS
    elif lowered.startswith("mac") or lowered == "darwin":
        family = OsFamily.MAC
    elif lowered == "linux":
        family = OsFamily.LINUX
    elif lowered.startswith("freebsd"):
        family = OsFamily.FREEBSD
    else:
        return OsClassification(family=OsFamily.OTHER, name=os_name or "")

    return OsClassification(family=family, name=family.value)
