"""Git commit query sub-gateway.

Import from submodules:
- abc: GitCommitOps
- real: RealGitCommitOps
- fake: FakeGitCommitOps
"""
