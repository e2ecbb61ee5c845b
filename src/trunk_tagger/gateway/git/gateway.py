"""Composite Git gateway grouping the commit and tag sub-gateways."""

from dataclasses import dataclass

from trunk_tagger.gateway.git.commit_ops.abc import GitCommitOps
from trunk_tagger.gateway.git.commit_ops.fake import FakeGitCommitOps
from trunk_tagger.gateway.git.tag_ops.abc import GitTagOps
from trunk_tagger.gateway.git.tag_ops.fake import FakeGitTagOps


@dataclass(frozen=True)
class GitGateway:
    """Repository access used by the publisher.

    Attributes:
        commit: Commit existence and reachability queries
        tag: Tag queries and mutations
    """

    commit: GitCommitOps
    tag: GitTagOps


def create_fake_git_gateway(
    *,
    commit: GitCommitOps | None = None,
    tag: GitTagOps | None = None,
) -> GitGateway:
    """Create a GitGateway with fakes for any sub-gateway not supplied."""
    return GitGateway(
        commit=commit if commit is not None else FakeGitCommitOps(),
        tag=tag if tag is not None else FakeGitTagOps(),
    )
