"""Dotted version string parsing and comparison"""
import re
from typing import List, Tuple, Union
import logging

logger = logging.getLogger(__name__)

Segment = Union[int, str]

# Runs of digits or of non-separator text; "1.10rc1" -> 1, 10, rc, 1
_SEGMENTS = re.compile(r"\d+|[^\d.\-_+]+")

# Pre-release and patch-level words, lowest first
_SPECIAL_FORMS = {
    "dev": 0,
    "alpha": 1, "a": 1,
    "beta": 2, "b": 2,
    "rc": 3, "c": 3,
    "pl": 5, "p": 5,
}
# Slot a release number takes between rc and pl when the other side is text
_NUMBER_RANK = 4


def parse_version(version_str: str) -> List[Segment]:
    """
    Split a version string into comparable segments.

    "1.0.10" -> [1, 0, 10], "2.1-Beta" -> [2, 1, "beta"], "1.10rc1" -> [1, 10, "rc", 1].
    Raises ValueError for a blank version.
    """
    if version_str is None or not str(version_str).strip():
        raise ValueError("Version string must not be blank")

    segments: List[Segment] = []
    for piece in _SEGMENTS.findall(str(version_str).strip()):
        segments.append(int(piece) if piece.isdigit() else piece.lower())
    if not segments:
        raise ValueError(f"Version string has no segments: {version_str!r}")
    return segments


def _segment_key(segment: Segment) -> Tuple[int, int, Segment]:
    if isinstance(segment, int):
        return (_NUMBER_RANK, 0, segment)
    rank = _SPECIAL_FORMS.get(segment)
    if rank is None:
        # unknown words sort below every known form, then alphabetically
        return (-1, 0, segment)
    return (rank, 0, "")


def _compare_segments(a: Segment, b: Segment) -> int:
    if isinstance(a, int) and isinstance(b, int):
        return (a > b) - (a < b)
    key_a, key_b = _segment_key(a), _segment_key(b)
    if key_a[0] != key_b[0]:
        return -1 if key_a[0] < key_b[0] else 1
    if isinstance(a, str) and isinstance(b, str):
        return (a > b) - (a < b) if key_a[0] == -1 else 0
    return 0


def compare_versions(left: str, right: str) -> int:
    """Return -1, 0 or 1 as left is lower, equal or higher than right"""
    left_parts = parse_version(left)
    right_parts = parse_version(right)

    for a, b in zip(left_parts, right_parts):
        result = _compare_segments(a, b)
        if result:
            return result

    # a leftover number raises the longer version ("1.0" < "1.0.1"),
    # a leftover pre-release word lowers it ("1.0-beta" < "1.0")
    if len(left_parts) != len(right_parts):
        longer_is_left = len(left_parts) > len(right_parts)
        extra = (left_parts if longer_is_left else right_parts)[min(len(left_parts), len(right_parts))]
        if isinstance(extra, int) or _segment_key(extra)[0] > _NUMBER_RANK:
            longer_wins = 1
        else:
            longer_wins = -1
        return longer_wins if longer_is_left else -longer_wins
    return 0


def version_at_least(version: str, minimum: str) -> bool:
    """Check version >= minimum, treating unparseable input as not satisfied"""
    try:
        return compare_versions(version, minimum) >= 0
    except ValueError as e:
        logger.debug(f"Cannot compare version {version!r} with {minimum!r}: {e}")
        return False
