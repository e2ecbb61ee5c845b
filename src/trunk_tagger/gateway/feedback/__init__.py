"""User-facing diagnostic output with mode awareness.

Import from submodules:
- abc: UserFeedback
- real: InteractiveFeedback, SuppressedFeedback
- fake: FakeUserFeedback
"""
