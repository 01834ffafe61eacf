"""Core data models for pathscrub."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntFlag

from pathscrub.exceptions import InvalidArgumentError


class ScrubOptions(IntFlag):
    """Which character-replacement passes to run on a name."""

    NONE = 0
    SCRUB_RESERVED_CHARS = 1
    SCRUB_FILESYSTEM_ILLEGAL_CHARS = 2
    SCRUB_URI_ILLEGAL_CHARS = 4
    ALL = SCRUB_RESERVED_CHARS | SCRUB_FILESYSTEM_ILLEGAL_CHARS | SCRUB_URI_ILLEGAL_CHARS

    @classmethod
    def from_names(cls, names: str | Iterable[str]) -> "ScrubOptions":
        """
        Build options from short names.

        Accepts an iterable of names or a single comma-separated string.
        Recognized names (case-insensitive): reserved, filesystem, uri,
        all, none.

        Raises:
            InvalidArgumentError: If a name is not recognized
        """
        if isinstance(names, str):
            names = names.split(",")

        result = cls.NONE
        for raw in names:
            name = raw.strip().lower()
            if not name:
                continue
            if name not in _OPTION_NAMES:
                valid = ", ".join(sorted(_OPTION_NAMES))
                raise InvalidArgumentError(f"Unknown scrub option '{raw}' (expected one of: {valid})")
            result |= _OPTION_NAMES[name]
        return result


_OPTION_NAMES: dict[str, ScrubOptions] = {
    "none": ScrubOptions.NONE,
    "reserved": ScrubOptions.SCRUB_RESERVED_CHARS,
    "filesystem": ScrubOptions.SCRUB_FILESYSTEM_ILLEGAL_CHARS,
    "uri": ScrubOptions.SCRUB_URI_ILLEGAL_CHARS,
    "all": ScrubOptions.ALL,
}


@dataclass(frozen=True)
class MultiFlag:
    """Where a flag lives when a flag set spans several bit fields."""

    flag_value: int
    column: int


@dataclass(frozen=True)
class SplitPath:
    """A raw path broken into its directory and final file name."""

    directory: str
    filename: str
