"""pathscrub: replace illegal characters in file names and paths."""

from pathscrub.exceptions import (
    FlagColumnOutOfRangeError,
    InvalidArgumentError,
    MissingAnnotationError,
    PathScrubError,
    PathTraversalError,
)
from pathscrub.flags import (
    BitField,
    get_multi_flag,
    is_any_flag_set,
    is_flag_set,
    is_multi_flag_set,
    set_flag,
)
from pathscrub.models import MultiFlag, ScrubOptions, SplitPath
from pathscrub.platforms import (
    POSIX_POLICY,
    WINDOWS_POLICY,
    PlatformPolicy,
    get_policy,
    host_policy,
)
from pathscrub.sanitizer import (
    PathSanitizer,
    contains_traversal_sequence,
    create_safe_file_name,
    create_safe_path,
)

from pathscrub._version import __version__

__all__ = [
    "__version__",
    # Sanitizing
    "PathSanitizer",
    "ScrubOptions",
    "SplitPath",
    "contains_traversal_sequence",
    "create_safe_file_name",
    "create_safe_path",
    # Platforms
    "PlatformPolicy",
    "POSIX_POLICY",
    "WINDOWS_POLICY",
    "get_policy",
    "host_policy",
    # Flags
    "BitField",
    "MultiFlag",
    "get_multi_flag",
    "is_any_flag_set",
    "is_flag_set",
    "is_multi_flag_set",
    "set_flag",
    # Exceptions
    "PathScrubError",
    "InvalidArgumentError",
    "PathTraversalError",
    "MissingAnnotationError",
    "FlagColumnOutOfRangeError",
]
