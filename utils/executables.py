"""Executable lookup along a PATH-like search list"""
from typing import Callable, Optional
import logging

logger = logging.getLogger(__name__)

UNIX_SEPARATOR = ":"
WINDOWS_SEPARATOR = ";"


def _usable_search_path(path_value: Optional[str]) -> Optional[str]:
    """Return the search list, or None when it is unset or blank"""
    if path_value is None or not path_value.strip():
        return None
    return path_value


def resolve_executable_path(file_name: str,
                            unix_like: bool,
                            windows: bool,
                            path_value: Optional[str],
                            is_file: Callable[[str], bool]) -> Optional[str]:
    """
    Find file_name in the directories listed in path_value.

    Directories are searched in order and the first hit wins. On Windows the
    candidate is "{dir}\\{name}.exe" but the result omits the ".exe" suffix.
    Without a search list, a file in the current directory yields the bare
    file name.
    """
    search_path = _usable_search_path(path_value)

    if unix_like:
        if search_path:
            for directory in search_path.split(UNIX_SEPARATOR):
                candidate = f"{directory}/{file_name}"
                if is_file(candidate):
                    logger.debug(f"Found {file_name} at {candidate}")
                    return candidate
        elif is_file(f"./{file_name}"):
            return file_name
        return None

    if windows:
        if search_path:
            for directory in search_path.split(WINDOWS_SEPARATOR):
                if is_file(f"{directory}\\{file_name}.exe"):
                    logger.debug(f"Found {file_name}.exe in {directory}")
                    return f"{directory}\\{file_name}"
        elif is_file(f"{file_name}.exe"):
            return file_name
        return None

    logger.debug(f"No executable search rules for this platform, skipping {file_name}")
    return None
