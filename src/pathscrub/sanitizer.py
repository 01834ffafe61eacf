"""Scrub illegal characters from names and assemble traversal-free paths."""

import logging

from pathscrub.exceptions import InvalidArgumentError, PathTraversalError
from pathscrub.flags import is_flag_set
from pathscrub.models import ScrubOptions, SplitPath
from pathscrub.platforms import REPLACEMENT_CHAR, PlatformPolicy, host_policy

logger = logging.getLogger(__name__)

# Document-management reserved characters and their stand-ins
RESERVED_CHAR_REPLACEMENTS: dict[str, str] = {
    "\\": "-",
    "/": "-",
    ":": ";",
    "*": "+",
    "?": "!",
    '"': "'",
    "<": "[",
    ">": "]",
    "|": "!",
}

URI_ILLEGAL_CHARS: frozenset[str] = frozenset("@\"$&:<>{}[]#%/;=?\\^|~'")

# Matched case-sensitively; "%2E%2E" and other encodings are not caught.
TRAVERSAL_SEQUENCES: tuple[str, ...] = ("..", "%2e%2e", "/..", "\\..")

_RESERVED_TABLE = str.maketrans(RESERVED_CHAR_REPLACEMENTS)
_URI_TABLE = str.maketrans(dict.fromkeys(URI_ILLEGAL_CHARS, REPLACEMENT_CHAR))


def contains_traversal_sequence(path: str) -> bool:
    """Return True if path contains any known traversal sequence."""
    return any(sequence in path for sequence in TRAVERSAL_SEQUENCES)


class PathSanitizer:
    """Replaces illegal characters in names and paths for one platform policy."""

    def __init__(self, policy: PlatformPolicy | None = None) -> None:
        self.policy = policy or host_policy()
        self._filesystem_table = str.maketrans(
            dict.fromkeys(self.policy.invalid_path_chars, REPLACEMENT_CHAR)
        )

    def create_safe_file_name(
        self, name: str, options: ScrubOptions | int = ScrubOptions.ALL
    ) -> str:
        """
        Replace illegal characters in a file name or any other string.

        Passes run in a fixed order, each enabled by its option bit:
        reserved characters, filesystem-invalid characters, then
        URI-invalid characters. Every replacement is one character for one
        character, so the result has the same length as name.

        Args:
            name: The string to scrub
            options: Which passes to run

        Returns:
            The scrubbed string

        Raises:
            InvalidArgumentError: If name is None or not a string
        """
        if not isinstance(name, str):
            raise InvalidArgumentError(f"Name to scrub must be a string, got {type(name).__name__}")

        result = name
        if is_flag_set(options, ScrubOptions.SCRUB_RESERVED_CHARS):
            result = self.replace_reserved_chars(result)
        if is_flag_set(options, ScrubOptions.SCRUB_FILESYSTEM_ILLEGAL_CHARS):
            result = self.replace_filesystem_illegal_chars(result)
        if is_flag_set(options, ScrubOptions.SCRUB_URI_ILLEGAL_CHARS):
            result = self.replace_uri_illegal_chars(result)

        if result != name:
            logger.debug("Scrubbed name %r -> %r", name, result)
        return result

    def replace_reserved_chars(self, name: str) -> str:
        return name.translate(_RESERVED_TABLE)

    def replace_filesystem_illegal_chars(self, name: str) -> str:
        return name.translate(self._filesystem_table)

    def replace_uri_illegal_chars(self, name: str) -> str:
        return name.translate(_URI_TABLE)

    def split_path(self, raw_path: str) -> SplitPath:
        """
        Split a path into its directory and file name.

        Raises:
            InvalidArgumentError: If the path is empty or either part is missing
        """
        if not raw_path or not isinstance(raw_path, str):
            raise InvalidArgumentError("The provided file path was null or empty")

        directory, filename = self.policy.path_module.split(raw_path)
        if not directory or not filename:
            raise InvalidArgumentError(f"The provided file path is not valid: '{raw_path}'")
        return SplitPath(directory=directory, filename=filename)

    def create_safe_path(self, raw_path: str) -> str:
        """
        Scrub a full file path and reject traversal attempts.

        The directory only has filesystem-invalid characters replaced; the
        file name goes through every pass. The two are joined with the
        policy's path flavor and the result is checked for traversal
        sequences.

        Args:
            raw_path: Directory and file name, e.g. "C:\\docs\\report.txt"

        Returns:
            The scrubbed path

        Raises:
            InvalidArgumentError: If the path is empty or cannot be split
            PathTraversalError: If the scrubbed path contains a traversal sequence
        """
        parts = self.split_path(raw_path)

        directory = self.replace_filesystem_illegal_chars(parts.directory)
        filename = self.create_safe_file_name(parts.filename, ScrubOptions.ALL)
        safe_path = self.policy.path_module.join(directory, filename)

        if contains_traversal_sequence(safe_path):
            logger.warning("Rejected path with traversal sequence: %r", raw_path)
            raise PathTraversalError(safe_path)
        return safe_path


def create_safe_file_name(
    name: str,
    options: ScrubOptions | int = ScrubOptions.ALL,
    *,
    policy: PlatformPolicy | None = None,
) -> str:
    """Scrub name with a PathSanitizer for policy (host by default)."""
    return PathSanitizer(policy).create_safe_file_name(name, options)


def create_safe_path(raw_path: str, *, policy: PlatformPolicy | None = None) -> str:
    """Scrub raw_path with a PathSanitizer for policy (host by default)."""
    return PathSanitizer(policy).create_safe_path(raw_path)
