"""Convenience wrappers around the ElevenLabs provider.

Each factory returns an async callable. The callable loads configuration
from the environment and builds a fresh client on every invocation, so a
missing ELEVENLABS_API_KEY fails before any request is sent. The client's
connections are closed before the callable returns.

Example:
    speak = tts('turbo_v2_5', 'george')
    audio = await speak("Hello there")
    audio.save("hello.mp3")
"""

import logging
from types import SimpleNamespace
from typing import Any, Awaitable, Callable, Dict, Optional

from elevenkit.speech.audio import AudioFile
from elevenkit.speech.catalog import (
    DEFAULT_MODEL,
    DEFAULT_STS_MODEL,
    DEFAULT_VOICE,
)
from elevenkit.speech.elevenlabs_provider import (
    ElevenLabsConfig,
    ElevenLabsProvider,
)

logger = logging.getLogger(__name__)


def _provider() -> ElevenLabsProvider:
    return ElevenLabsProvider(ElevenLabsConfig())


def tts(
    model: str = DEFAULT_MODEL,
    voice: str = DEFAULT_VOICE,
    options: Optional[Dict[str, Any]] = None
) -> Callable[[str], Awaitable[AudioFile]]:
    """Create a text-to-speech function.

    Args:
        model: Model name or raw model id
        voice: Voice name or raw voice id
        options: Extra ``text_to_speech.convert`` arguments, except
            ``text`` and ``model_id``

    Returns:
        Async function taking the text and returning ``speech.mp3``
    """
    options = dict(options or {})

    async def synthesize(prompt: str) -> AudioFile:
        async with _provider() as provider:
            return await provider.speak(prompt, voice=voice, model=model,
                                        **options)

    return synthesize


def sts(
    model_id: str = DEFAULT_STS_MODEL,
    voice: str = DEFAULT_VOICE,
    options: Optional[Dict[str, Any]] = None
) -> Callable[[Any], Awaitable[AudioFile]]:
    """Create a speech-to-speech conversion function.

    Output format defaults to ``mp3_44100_128``; pass ``output_format`` in
    options to override it.

    Returns:
        Async function taking the source audio and returning
        ``converted-speech.mp3``
    """
    options = dict(options or {})

    async def convert(audio: Any) -> AudioFile:
        async with _provider() as provider:
            return await provider.convert(audio, voice=voice, model=model_id,
                                          **options)

    return convert


def isl() -> Callable[[Any], Awaitable[AudioFile]]:
    """Create a speech isolation function.

    Returns:
        Async function taking the source audio and returning
        ``isolated-speech.mp3``
    """
    async def isolate(audio: Any) -> AudioFile:
        async with _provider() as provider:
            return await provider.isolate(audio)

    return isolate


elevenlabs = SimpleNamespace(tts=tts, sts=sts, isl=isl)
