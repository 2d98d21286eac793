"""Error taxonomy for retag.

Every gateway-facing failure is fatal to the run. Each type carries a
user-facing ``message`` and a stable ``error_type`` so callers and tests can
tell exactly which step failed.
"""


class RetagError(Exception):
    """Base class for failures reported as ``Error: <message>``."""

    error_type = "retag-error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotARepository(RetagError):
    error_type = "not-a-repository"


class TagDiscoveryFailed(RetagError):
    """Fetching or listing tags failed."""

    error_type = "tag-discovery-failed"


class RefResolutionFailed(RetagError):
    """A tag or HEAD could not be resolved to a commit."""

    error_type = "ref-resolution-failed"

    def __init__(self, message: str, *, ref: str) -> None:
        super().__init__(message)
        self.ref = ref


class TagMutationFailed(RetagError):
    """A local tag could not be deleted or created."""

    error_type = "tag-mutation-failed"

    def __init__(self, message: str, *, tag_name: str) -> None:
        super().__init__(message)
        self.tag_name = tag_name


class TagDeleteFailed(TagMutationFailed):
    error_type = "tag-delete-failed"


class TagCreateFailed(TagMutationFailed):
    error_type = "tag-create-failed"


class PushRejected(RetagError):
    """The remote refused the force-push of a tag ref."""

    error_type = "push-rejected"

    def __init__(self, message: str, *, tag_name: str, remote: str) -> None:
        super().__init__(message)
        self.tag_name = tag_name
        self.remote = remote


class NoEligibleTags(RetagError):
    error_type = "no-eligible-tags"


class RootTagMissing(RetagError):
    error_type = "root-tag-missing"


class InvalidConfig(RetagError):
    error_type = "invalid-config"


class UserCancelled(Exception):
    """The user aborted an interactive prompt.

    Reported as a neutral cancellation, never as an error.
    """
