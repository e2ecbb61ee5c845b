"""Integration tests for RealGitTagOps against a real bare remote."""

from collections.abc import Callable
from pathlib import Path

import pytest

from tests.integration.conftest import run_git
from trunk_tagger.gateway.git.tag_ops.real import RealGitTagOps
from trunk_tagger.gateway.git.tag_ops.types import TagPushError, TagPushResult

pytestmark = pytest.mark.integration


def _tag_for_head(repo: Path) -> tuple[str, str]:
    sha = run_git(repo, "rev-parse", "HEAD")
    return f"trunk/{sha}", sha


def test_create_and_delete_local_tag(repo: Path) -> None:
    ops = RealGitTagOps()
    tag, sha = _tag_for_head(repo)

    assert not ops.local_tag_exists(repo, tag)
    ops.create_tag(repo, tag, sha)
    assert ops.local_tag_exists(repo, tag)
    assert run_git(repo, "rev-parse", f"refs/tags/{tag}") == sha

    ops.delete_tag(repo, tag)
    assert not ops.local_tag_exists(repo, tag)


def test_local_tag_exists_does_not_match_prefixes(repo: Path) -> None:
    ops = RealGitTagOps()
    tag, sha = _tag_for_head(repo)
    ops.create_tag(repo, tag, sha)

    assert not ops.local_tag_exists(repo, "trunk/")
    assert not ops.local_tag_exists(repo, tag[:-1])


def test_create_existing_tag_raises(repo: Path) -> None:
    ops = RealGitTagOps()
    tag, sha = _tag_for_head(repo)
    ops.create_tag(repo, tag, sha)

    with pytest.raises(RuntimeError, match="Failed to create tag"):
        ops.create_tag(repo, tag, sha)


def test_delete_missing_tag_raises(repo: Path) -> None:
    with pytest.raises(RuntimeError, match="Failed to delete tag"):
        RealGitTagOps().delete_tag(repo, "trunk/" + "0" * 40)


def test_push_makes_tag_visible_on_remote(repo: Path, origin: Path) -> None:
    ops = RealGitTagOps()
    tag, sha = _tag_for_head(repo)
    ops.create_tag(repo, tag, sha)

    assert not ops.remote_tag_exists(repo, "origin", tag)
    assert ops.push_tag(repo, "origin", tag) == TagPushResult()
    assert ops.remote_tag_exists(repo, "origin", tag)
    assert run_git(origin, "rev-parse", f"refs/tags/{tag}") == sha


def test_push_identical_tag_from_second_clone_succeeds(
    repo: Path, make_clone: Callable[[str], Path]
) -> None:
    ops = RealGitTagOps()
    tag, sha = _tag_for_head(repo)
    other = make_clone("other-runner")
    ops.create_tag(repo, tag, sha)
    ops.push_tag(repo, "origin", tag)

    ops.create_tag(other, tag, sha)

    assert ops.push_tag(other, "origin", tag) == TagPushResult()


def test_push_conflicting_tag_is_rejected_as_existing(
    repo: Path, make_clone: Callable[[str], Path]
) -> None:
    """A competitor's annotated tag under the same name blocks the push."""
    ops = RealGitTagOps()
    tag, sha = _tag_for_head(repo)
    other = make_clone("other-runner")
    run_git(repo, "tag", "-a", tag, sha, "-m", "annotated by a competitor")
    run_git(repo, "push", "origin", f"refs/tags/{tag}")

    ops.create_tag(other, tag, sha)
    result = ops.push_tag(other, "origin", tag)

    assert isinstance(result, TagPushError)
    assert result.already_exists
    assert "already exists" in result.message


def test_push_to_unknown_remote_is_not_an_existing_tag(repo: Path) -> None:
    ops = RealGitTagOps()
    tag, sha = _tag_for_head(repo)
    ops.create_tag(repo, tag, sha)

    result = ops.push_tag(repo, "nowhere", tag)

    assert isinstance(result, TagPushError)
    assert not result.already_exists


def test_remote_query_against_unknown_remote_raises(repo: Path) -> None:
    with pytest.raises(RuntimeError, match="Failed to list tag"):
        RealGitTagOps().remote_tag_exists(repo, "nowhere", "trunk/" + "0" * 40)


def test_fetch_tags_brings_in_competitor_tag(
    repo: Path, make_clone: Callable[[str], Path]
) -> None:
    ops = RealGitTagOps()
    tag, sha = _tag_for_head(repo)
    other = make_clone("other-runner")
    ops.create_tag(repo, tag, sha)
    ops.push_tag(repo, "origin", tag)
    assert not ops.local_tag_exists(other, tag)

    ops.fetch_tags(other, "origin")

    assert ops.local_tag_exists(other, tag)
