"""Unit tests for in-memory audio results."""

import os

import pytest

from elevenkit.speech.audio import AudioFile, collect_audio, AUDIO_MIME_TYPE


async def _chunks(*chunks):
    for chunk in chunks:
        yield chunk


class TestAudioFile:
    """Tests for AudioFile."""

    def test_metadata(self):
        audio = AudioFile(b'abc', 'speech.mp3')
        assert audio.name == 'speech.mp3'
        assert audio.content_type == AUDIO_MIME_TYPE == 'audio/mpeg'
        assert audio.size == 3
        assert audio.read() == b'abc'

    def test_save_creates_parent_dirs(self, tmp_path):
        audio = AudioFile(b'mp3 data', 'speech.mp3')
        target = tmp_path / 'nested' / 'out.mp3'

        result = audio.save(str(target))

        assert result == str(target)
        assert os.path.exists(target)
        assert target.read_bytes() == b'mp3 data'


class TestCollectAudio:
    """Tests for collect_audio."""

    @pytest.mark.asyncio
    async def test_async_stream(self):
        data = await collect_audio(_chunks(b'ab', b'', b'cd'))
        assert data == b'abcd'

    @pytest.mark.asyncio
    async def test_sync_iterable(self):
        assert await collect_audio([b'x', b'y']) == b'xy'

    @pytest.mark.asyncio
    async def test_raw_bytes(self):
        assert await collect_audio(b'raw') == b'raw'

    @pytest.mark.asyncio
    async def test_empty_stream(self):
        assert await collect_audio(_chunks()) == b''
