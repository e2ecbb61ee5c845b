"""Time gateway.

Import from submodules:
- abc: Time
- real: RealTime
- fake: FakeTime
"""
