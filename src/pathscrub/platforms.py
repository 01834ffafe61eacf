"""Platform policies: which characters a host filesystem rejects in paths."""

import ntpath
import os
import posixpath
from dataclasses import dataclass, field
from types import ModuleType

from pathscrub.exceptions import InvalidArgumentError

REPLACEMENT_CHAR = "_"

# NUL and the ASCII control range are invalid on every platform.
CONTROL_CHARS: frozenset[str] = frozenset(chr(code) for code in range(0x20))

WINDOWS_EXTRA_CHARS: frozenset[str] = frozenset('"<>|')


@dataclass(frozen=True)
class PlatformPolicy:
    """Invalid path characters and path flavor for one target platform."""

    name: str
    invalid_path_chars: frozenset[str] = field(default_factory=frozenset)
    path_module: ModuleType = posixpath

    def __post_init__(self) -> None:
        chars = frozenset(self.invalid_path_chars) | CONTROL_CHARS
        if REPLACEMENT_CHAR in chars:
            raise ValueError(
                f"'{REPLACEMENT_CHAR}' is the replacement character and cannot be invalid"
            )
        object.__setattr__(self, "invalid_path_chars", chars)

    def with_extra_chars(self, chars: str) -> "PlatformPolicy":
        """Return a copy of this policy that also rejects chars."""
        if not chars:
            return self
        return PlatformPolicy(
            name=self.name,
            invalid_path_chars=self.invalid_path_chars | frozenset(chars),
            path_module=self.path_module,
        )


POSIX_POLICY = PlatformPolicy(name="posix", path_module=posixpath)
WINDOWS_POLICY = PlatformPolicy(
    name="windows", invalid_path_chars=WINDOWS_EXTRA_CHARS, path_module=ntpath
)


def host_policy() -> PlatformPolicy:
    """Policy for the operating system we are running on."""
    return WINDOWS_POLICY if os.name == "nt" else POSIX_POLICY


def get_policy(name: str) -> PlatformPolicy:
    """
    Resolve a policy by name: host, posix or windows.

    Raises:
        InvalidArgumentError: If the name is not recognized
    """
    key = name.strip().lower()
    if key == "host":
        return host_policy()
    if key == "posix":
        return POSIX_POLICY
    if key == "windows":
        return WINDOWS_POLICY
    raise InvalidArgumentError(f"Unknown platform '{name}' (expected host, posix or windows)")
