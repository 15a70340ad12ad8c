"""In-memory audio results.

Every operation buffers the vendor's streamed response completely and
hands it back as an ``AudioFile``.
"""

import io
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

AUDIO_MIME_TYPE = "audio/mpeg"

SPEECH_FILENAME = "speech.mp3"
CONVERTED_SPEECH_FILENAME = "converted-speech.mp3"
ISOLATED_SPEECH_FILENAME = "isolated-speech.mp3"


class AudioFile(io.BytesIO):
    """Named in-memory audio file.

    Behaves like any binary file object, so it can be passed straight back
    into the SDK as an upload.

    Attributes:
        name: File name reported to consumers.
        content_type: MIME type, always ``audio/mpeg``.
    """

    def __init__(self, data: bytes, name: str):
        super().__init__(data)
        self.name = name
        self.content_type = AUDIO_MIME_TYPE

    @property
    def size(self) -> int:
        return len(self.getbuffer())

    def save(self, path: str) -> str:
        """Write the buffered audio to ``path``.

        Args:
            path: Destination file path. Parent directories are created.

        Returns:
            str: The path written to.
        """
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)
        with open(path, 'wb') as f:
            f.write(self.getvalue())
        logger.info("Saved %d bytes of audio to %s", self.size, path)
        return path

    def __repr__(self) -> str:
        return (
            f"AudioFile(name={self.name!r}, "
            f"content_type={self.content_type!r}, size={self.size})"
        )


async def collect_audio(stream: Any) -> bytes:
    """Drain a stream of audio chunks into a single buffer.

    Accepts an async iterator of byte chunks (what the async SDK client
    returns), a plain iterable of chunks, or raw bytes.
    """
    if isinstance(stream, (bytes, bytearray)):
        return bytes(stream)

    buffer = bytearray()
    if hasattr(stream, "__aiter__"):
        async for chunk in stream:
            buffer.extend(chunk)
    else:
        for chunk in stream:
            buffer.extend(chunk)
    logger.debug("Collected %d bytes of audio", len(buffer))
    return bytes(buffer)
