"""Git tag operations sub-gateway.

This module provides a separate gateway for tag operations,
including checking tag existence, creating, deleting and pushing tags.

Import from submodules:
- abc: GitTagOps
- real: RealGitTagOps
- fake: FakeGitTagOps, FakeRemote
- dry_run: DryRunGitTagOps
- types: TagPushResult, TagPushError
"""
