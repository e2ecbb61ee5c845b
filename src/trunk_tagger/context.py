"""Dependency container for trunk-tagger commands.

TaggerContext is created once at the CLI entry point and threaded through
commands via Click's context object. Tests build one with fakes through
context_for_test() and pass it as ``obj`` to CliRunner.invoke().
"""

from dataclasses import dataclass, replace
from pathlib import Path

from trunk_tagger.config import CONFIG_FILENAME, PublisherConfig, load_config
from trunk_tagger.gateway.feedback.abc import UserFeedback
from trunk_tagger.gateway.feedback.fake import FakeUserFeedback
from trunk_tagger.gateway.feedback.real import InteractiveFeedback, SuppressedFeedback
from trunk_tagger.gateway.git.commit_ops.real import RealGitCommitOps
from trunk_tagger.gateway.git.gateway import GitGateway, create_fake_git_gateway
from trunk_tagger.gateway.git.tag_ops.abc import GitTagOps
from trunk_tagger.gateway.git.tag_ops.dry_run import DryRunGitTagOps
from trunk_tagger.gateway.git.tag_ops.real import RealGitTagOps
from trunk_tagger.gateway.time.abc import Time
from trunk_tagger.gateway.time.fake import FakeTime
from trunk_tagger.gateway.time.real import RealTime
from trunk_tagger.publisher import TrunkTagPublisher


@dataclass(frozen=True)
class TaggerContext:
    """Immutable context holding all dependencies for a run.

    Frozen to prevent accidental modification at runtime; use with_config()
    to derive a context with CLI overrides applied.
    """

    git: GitGateway
    time: Time
    feedback: UserFeedback
    config: PublisherConfig
    repo_root: Path
    dry_run: bool

    def with_config(self, config: PublisherConfig) -> "TaggerContext":
        return replace(self, config=config)

    def publisher(self) -> TrunkTagPublisher:
        return TrunkTagPublisher(
            git=self.git,
            time=self.time,
            feedback=self.feedback,
            config=self.config,
            repo_root=self.repo_root,
        )


def create_context(
    *,
    repo_root: Path,
    config_path: Path | None,
    dry_run: bool,
    quiet: bool,
) -> TaggerContext:
    """Create production context with real implementations.

    Args:
        repo_root: Repository working directory
        config_path: Explicit config file; defaults to .trunk-tagger.toml in
            repo_root (missing file means defaults)
        dry_run: If True, wrap tag operations so mutations are printed, not run
        quiet: If True, suppress progress messages (errors still shown)

    Raises:
        ConfigError: If the config file is invalid
    """
    feedback: UserFeedback
    if quiet:
        feedback = SuppressedFeedback()
    else:
        feedback = InteractiveFeedback()

    config = load_config(config_path if config_path is not None else repo_root / CONFIG_FILENAME)

    tag_ops: GitTagOps = RealGitTagOps()
    if dry_run:
        tag_ops = DryRunGitTagOps(tag_ops, feedback)

    return TaggerContext(
        git=GitGateway(commit=RealGitCommitOps(), tag=tag_ops),
        time=RealTime(),
        feedback=feedback,
        config=config,
        repo_root=repo_root,
        dry_run=dry_run,
    )


def context_for_test(
    *,
    git: GitGateway | None = None,
    time: Time | None = None,
    feedback: UserFeedback | None = None,
    config: PublisherConfig | None = None,
    repo_root: Path | None = None,
    dry_run: bool = False,
) -> TaggerContext:
    """Create test context with fakes for anything not supplied.

    Example:
        >>> from trunk_tagger.gateway.git.tag_ops.fake import FakeGitTagOps
        >>> tag_ops = FakeGitTagOps()
        >>> ctx = context_for_test(git=create_fake_git_gateway(tag=tag_ops))
    """
    return TaggerContext(
        git=git if git is not None else create_fake_git_gateway(),
        time=time if time is not None else FakeTime(),
        feedback=feedback if feedback is not None else FakeUserFeedback(),
        config=config if config is not None else PublisherConfig(),
        repo_root=repo_root if repo_root is not None else Path("/fake/repo"),
        dry_run=dry_run,
    )
