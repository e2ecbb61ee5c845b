"""Commit SHA validation and trunk tag naming."""

import re

TAG_PREFIX = "trunk/"

# Full-length, lowercase object names only. Abbreviated or uppercase SHAs are
# rejected so that the derived tag name is canonical.
COMMIT_SHA_PATTERN = re.compile(r"^[a-f0-9]{40}$")


def is_valid_commit_sha(value: str) -> bool:
    """Return True if value is exactly 40 lowercase hexadecimal characters."""
    return COMMIT_SHA_PATTERN.fullmatch(value) is not None


def tag_name_for_commit(commit_sha: str) -> str:
    """Derive the trunk tag name for a commit.

    The name depends on nothing but the SHA, so every publisher triggered for
    the same commit targets the same tag.

    Example:
        >>> tag_name_for_commit("a" * 40)
        'trunk/aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa'
    """
    return f"{TAG_PREFIX}{commit_sha}"
