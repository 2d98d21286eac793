"""Shared pytest fixtures."""

import pytest

from retag.gateway.git.tag_ops.fake import FakeGitTagOps
from tests.test_utils.builders import COMMIT_A, COMMIT_B, COMMIT_HEAD


@pytest.fixture
def fake_git() -> FakeGitTagOps:
    """Repository with a root tag in sync with v1.2.0 and HEAD ahead of both."""
    return FakeGitTagOps(
        tags={"v1": COMMIT_A, "v1.1.0": COMMIT_B, "v1.2.0": COMMIT_A},
        head=COMMIT_HEAD,
    )
