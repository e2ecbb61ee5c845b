"""Git gateway: commit queries and tag operations.

Import from submodules:
- gateway: GitGateway, create_fake_git_gateway
- commit_ops: GitCommitOps and implementations
- tag_ops: GitTagOps and implementations
"""
