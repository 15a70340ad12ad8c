"""Shared helpers for tests."""


def stream(*chunks):
    """Build an async byte stream like the SDK's convert methods return."""
    async def _gen():
        for chunk in chunks:
            yield chunk
    return _gen()
