import pytest


@pytest.fixture
def api_key(monkeypatch):
    """Provide an ElevenLabs API key through the environment."""
    monkeypatch.setenv('ELEVENLABS_API_KEY', 'test-key')
    return 'test-key'


@pytest.fixture
def no_api_key(monkeypatch):
    """Make sure no ElevenLabs API key is visible."""
    monkeypatch.delenv('ELEVENLABS_API_KEY', raising=False)
