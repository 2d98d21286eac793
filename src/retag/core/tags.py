"""Tag classification: root tag, version tags, everything else.

A root tag is a major version with no minor part, such as ``v2`` or ``v2-beta``.
When several exist, the first one in repository order wins; no version
comparison is made.
"""

import re
from collections.abc import Sequence

_ROOT_TAG_RE = re.compile(r"^v\d+(?!\d|\.\d)")
_VERSION_TAG_RE = re.compile(r"^v\d+\.\d+")

SHORT_COMMIT_LENGTH = 7


def is_root_tag_name(name: str) -> bool:
    """Check whether a name has the major-version shape.

    Only meaningful through find_root_tag(), which picks the single root.
    """
    return _ROOT_TAG_RE.match(name) is not None


def find_root_tag(tags: Sequence[str]) -> str | None:
    """Return the first major-version tag, or None if there is none."""
    for tag in tags:
        if is_root_tag_name(tag):
            return tag
    return None


def filter_version_tags(tags: Sequence[str]) -> list[str]:
    """Return tags that carry at least major.minor, order preserved."""
    return [tag for tag in tags if _VERSION_TAG_RE.match(tag)]


def filter_non_root_tags(tags: Sequence[str]) -> list[str]:
    """Return every tag except the root tag, order preserved."""
    root_tag = find_root_tag(tags)
    if root_tag is None:
        return list(tags)
    return [tag for tag in tags if tag != root_tag]


def shorten_commit(commit: str) -> str:
    """Display form of a commit hash."""
    return commit[:SHORT_COMMIT_LENGTH]
