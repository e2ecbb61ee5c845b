"""Tests for context construction."""

from pathlib import Path

from trunk_tagger.config import PublisherConfig, RetryPolicy
from trunk_tagger.context import context_for_test, create_context
from trunk_tagger.gateway.feedback.fake import FakeUserFeedback
from trunk_tagger.gateway.feedback.real import InteractiveFeedback, SuppressedFeedback
from trunk_tagger.gateway.git.tag_ops.dry_run import DryRunGitTagOps
from trunk_tagger.gateway.git.tag_ops.real import RealGitTagOps
from trunk_tagger.gateway.time.fake import FakeTime


def test_create_context_uses_real_gateways(tmp_path: Path) -> None:
    ctx = create_context(repo_root=tmp_path, config_path=None, dry_run=False, quiet=False)

    assert isinstance(ctx.git.tag, RealGitTagOps)
    assert isinstance(ctx.feedback, InteractiveFeedback)
    assert ctx.config == PublisherConfig()
    assert ctx.repo_root == tmp_path


def test_create_context_dry_run_and_quiet(tmp_path: Path) -> None:
    ctx = create_context(repo_root=tmp_path, config_path=None, dry_run=True, quiet=True)

    assert isinstance(ctx.git.tag, DryRunGitTagOps)
    assert isinstance(ctx.feedback, SuppressedFeedback)
    assert ctx.dry_run


def test_create_context_reads_repo_config(tmp_path: Path) -> None:
    (tmp_path / ".trunk-tagger.toml").write_text("[retry]\nmax_retries = 1\n", encoding="utf-8")

    ctx = create_context(repo_root=tmp_path, config_path=None, dry_run=False, quiet=False)

    assert ctx.config.retry == RetryPolicy(max_retries=1)


def test_explicit_config_path_wins(tmp_path: Path) -> None:
    (tmp_path / ".trunk-tagger.toml").write_text('remote = "ignored"\n', encoding="utf-8")
    explicit = tmp_path / "ci.toml"
    explicit.write_text('remote = "upstream"\n', encoding="utf-8")

    ctx = create_context(repo_root=tmp_path, config_path=explicit, dry_run=False, quiet=False)

    assert ctx.config.remote == "upstream"


def test_context_for_test_defaults_to_fakes() -> None:
    ctx = context_for_test()

    assert isinstance(ctx.time, FakeTime)
    assert isinstance(ctx.feedback, FakeUserFeedback)
    assert ctx.repo_root == Path("/fake/repo")
    assert not ctx.dry_run


def test_with_config_returns_new_context() -> None:
    ctx = context_for_test()
    changed = ctx.with_config(PublisherConfig(remote="upstream"))

    assert changed.config.remote == "upstream"
    assert ctx.config.remote == "origin"
    assert changed.git is ctx.git
