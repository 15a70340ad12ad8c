"""Unit tests for the speech service layer.

The provider's SDK client is mocked; files are real and live in tmp_path.
"""

from unittest.mock import MagicMock, patch

import pytest

from elevenkit.speech.elevenlabs_provider import (
    ElevenLabsConfig,
    ElevenLabsProvider,
)
from elevenkit.speech.service import SpeechService
from tests.helpers import stream


@pytest.fixture
def mock_client():
    """Mock the client the provider builds."""
    with patch(
        'elevenkit.speech.elevenlabs_provider.AsyncElevenLabs'
    ) as mock:
        client = MagicMock()
        mock.return_value = client
        yield client


@pytest.fixture
def service(mock_client):
    return SpeechService(ElevenLabsConfig(api_key='test-key'))


def test_service_uses_registered_provider(service):
    assert isinstance(service.provider, ElevenLabsProvider)


@pytest.mark.asyncio
async def test_text_to_speech(service, mock_client, tmp_path):
    mock_client.text_to_speech.convert.return_value = stream(b'mp3', b'!')
    output = tmp_path / 'out' / 'hello.mp3'

    result = await service.text_to_speech('Hello', str(output),
                                          voice='daniel')

    assert result == str(output)
    assert output.read_bytes() == b'mp3!'
    args = mock_client.text_to_speech.convert.call_args
    assert args.args[0] == 'onwK4e9ZLuTAKqWW03F9'


@pytest.mark.asyncio
async def test_text_to_speech_rejects_blank_text(service, mock_client,
                                                 tmp_path):
    with pytest.raises(ValueError, match="must not be empty"):
        await service.text_to_speech('   ', str(tmp_path / 'x.mp3'))
    mock_client.text_to_speech.convert.assert_not_called()


@pytest.mark.asyncio
async def test_speech_to_speech(service, mock_client, tmp_path):
    source = tmp_path / 'in.mp3'
    source.write_bytes(b'source')
    mock_client.speech_to_speech.convert.return_value = stream(b'converted')
    output = tmp_path / 'converted.mp3'

    await service.speech_to_speech(str(source), str(output), voice='sarah',
                                   output_format='mp3_22050_32')

    assert output.read_bytes() == b'converted'
    kwargs = mock_client.speech_to_speech.convert.call_args.kwargs
    assert kwargs['audio'].name == str(source)
    assert kwargs['output_format'] == 'mp3_22050_32'


@pytest.mark.asyncio
async def test_isolate_speech(service, mock_client, tmp_path):
    source = tmp_path / 'noisy.mp3'
    source.write_bytes(b'noisy')
    mock_client.audio_isolation.convert.return_value = stream(b'clean')
    output = tmp_path / 'clean.mp3'

    await service.isolate_speech(str(source), str(output))

    assert output.read_bytes() == b'clean'


@pytest.mark.asyncio
async def test_http_client_closed_after_call(service, mock_client, tmp_path):
    mock_client.text_to_speech.convert.return_value = stream(b'mp3')

    with patch(
        'elevenkit.speech.elevenlabs_provider.create_client',
        return_value=mock_client
    ) as create:
        await service.text_to_speech('Hello', str(tmp_path / 'a.mp3'))

    http_client = create.call_args.kwargs['httpx_client']
    assert http_client.is_closed
    assert service.provider._http_client is None


@pytest.mark.asyncio
async def test_failed_call_writes_nothing(service, mock_client, tmp_path):
    mock_client.text_to_speech.convert.side_effect = RuntimeError("boom")
    output = tmp_path / 'out.mp3'

    with pytest.raises(RuntimeError):
        await service.text_to_speech('Hello', str(output))
    assert not output.exists()


def test_listing(service):
    assert 'charlotte' in service.list_speakers()
    assert 'english_sts_v2' in service.list_models()
