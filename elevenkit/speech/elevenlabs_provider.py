"""ElevenLabs speech provider implementation.

This module provides the ElevenLabs provider using the official
``elevenlabs`` async SDK client. Every operation makes one outbound call,
drains the streamed response into memory and returns it as an
``AudioFile``. Vendor and network errors propagate unchanged.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

import httpx
from elevenlabs.client import AsyncElevenLabs

from elevenkit.speech.audio import (
    AudioFile,
    collect_audio,
    SPEECH_FILENAME,
    CONVERTED_SPEECH_FILENAME,
    ISOLATED_SPEECH_FILENAME,
)
from elevenkit.speech.catalog import (
    VOICES,
    MODELS,
    DEFAULT_VOICE,
    DEFAULT_MODEL,
    DEFAULT_STS_MODEL,
    resolve_voice,
    resolve_model,
)
from elevenkit.speech.errors import ElevenLabsConfigError
from elevenkit.speech.provider import (
    BaseSpeechConfig,
    BaseSpeechProvider,
    register_provider,
    register_config,
)

logger = logging.getLogger(__name__)

API_KEY_ENV = 'ELEVENLABS_API_KEY'
DEFAULT_OUTPUT_FORMAT = 'mp3_44100_128'


def _mask(secret: Optional[str]) -> str:
    if not secret:
        return '<unset>'
    return f"{secret[:4]}***"


@register_config('elevenlabs')
@dataclass
class ElevenLabsConfig(BaseSpeechConfig):
    """ElevenLabs configuration.

    This class automatically loads configuration from environment variables
    if not provided during initialization. A missing API key is rejected
    here, before any client is built or request is sent.

    Attributes:
        api_key: ElevenLabs API key
        voice: Default voice name or raw voice id
        model: Default text-to-speech model name or raw model id
        sts_model: Default speech-to-speech model id
        output_format: Output format requested for speech-to-speech
        base_url: Optional API base URL override
        timeout: Request timeout in seconds

    Environment variables:
        ELEVENLABS_API_KEY: API key (required)
        ELEVENLABS_VOICE: Default voice (default: aria)
        ELEVENLABS_MODEL: Default model (default: multilingual_v2)
        ELEVENLABS_STS_MODEL: Speech-to-speech model
            (default: eleven_multilingual_sts_v2)
        ELEVENLABS_OUTPUT_FORMAT: Output format (default: mp3_44100_128)
        ELEVENLABS_BASE_URL: API base URL (default: SDK default)
        ELEVENLABS_TIMEOUT: Request timeout in seconds (default: 240)
    """
    api_key: Optional[str] = field(
        default_factory=lambda: os.environ.get(API_KEY_ENV)
    )
    voice: str = field(
        default_factory=lambda: os.environ.get(
            'ELEVENLABS_VOICE', DEFAULT_VOICE
        )
    )
    model: str = field(
        default_factory=lambda: os.environ.get(
            'ELEVENLABS_MODEL', DEFAULT_MODEL
        )
    )
    sts_model: str = field(
        default_factory=lambda: os.environ.get(
            'ELEVENLABS_STS_MODEL', DEFAULT_STS_MODEL
        )
    )
    output_format: str = field(
        default_factory=lambda: os.environ.get(
            'ELEVENLABS_OUTPUT_FORMAT', DEFAULT_OUTPUT_FORMAT
        )
    )
    base_url: Optional[str] = field(
        default_factory=lambda: os.environ.get('ELEVENLABS_BASE_URL')
    )
    # Raw environment strings are parsed in validate()
    timeout: Union[float, str] = field(
        default_factory=lambda: os.environ.get('ELEVENLABS_TIMEOUT', '240')
    )

    def __post_init__(self):
        """Validate configuration and log loading process."""
        self._log_config_loading()
        self.validate()

    def _log_config_loading(self):
        """Log configuration loading process."""
        logger.info("ElevenLabs API key: %s", _mask(self.api_key))
        logger.info("Voice: %s", self.voice)
        logger.info("Model: %s", self.model)
        logger.debug("STS model: %s", self.sts_model)
        logger.debug("Output format: %s", self.output_format)
        logger.debug("Base URL: %s", self.base_url or '<default>')
        logger.debug("Timeout: %s", self.timeout)

    def validate(self) -> bool:
        """Validate ElevenLabs configuration.

        Raises:
            ElevenLabsConfigError: If the API key is missing or a numeric
                setting is out of range.
        """
        if not self.api_key:
            raise ElevenLabsConfigError(f"{API_KEY_ENV} is not set")
        try:
            self.timeout = float(self.timeout)
        except (TypeError, ValueError) as e:
            raise ElevenLabsConfigError(
                f"ELEVENLABS_TIMEOUT must be a number, got {self.timeout!r}"
            ) from e
        if self.timeout <= 0:
            raise ElevenLabsConfigError("timeout must be positive")
        return True

    @classmethod
    def from_env(cls) -> 'ElevenLabsConfig':
        """Create ElevenLabs configuration from environment variables.

        This method is kept for backward compatibility.
        """
        logger.warning(
            "from_env() is deprecated. Configuration is now automatically "
            "loaded during initialization."
        )
        return cls()


def create_client(
    config: Optional[ElevenLabsConfig] = None,
    httpx_client: Optional[httpx.AsyncClient] = None
) -> AsyncElevenLabs:
    """Build an authenticated async ElevenLabs client.

    Args:
        config: Configuration to use. Loaded from the environment when
            omitted, which fails fast if ELEVENLABS_API_KEY is not set.
        httpx_client: HTTP client for the SDK to send requests through.
            The caller owns it and is responsible for closing it.

    Returns:
        AsyncElevenLabs: Configured client instance.
    """
    if config is None:
        config = ElevenLabsConfig()
    kwargs = {'api_key': config.api_key, 'timeout': config.timeout}
    if config.base_url:
        kwargs['base_url'] = config.base_url
    if httpx_client is not None:
        kwargs['httpx_client'] = httpx_client
    logger.debug("Creating ElevenLabs client (base_url=%s)",
                 config.base_url or '<default>')
    return AsyncElevenLabs(**kwargs)


@register_provider('elevenlabs')
class ElevenLabsProvider(BaseSpeechProvider):
    """ElevenLabs speech provider implementation.

    The provider owns the HTTP connection pool behind its client. Use it as
    an async context manager, or call ``aclose()``, to release it.
    """

    def __init__(self, config: ElevenLabsConfig):
        """Initialize ElevenLabs provider.

        Args:
            config: Provider configuration
        """
        super().__init__(config)
        self._client = None
        self._http_client = None

    @property
    def client(self) -> AsyncElevenLabs:
        """Get the ElevenLabs client, creating it on first use."""
        if self._client is None:
            self._http_client = httpx.AsyncClient(timeout=self.config.timeout)
            self._client = create_client(
                self.config, httpx_client=self._http_client
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client. A later call opens a new one."""
        http_client = self._http_client
        self._client = None
        self._http_client = None
        if http_client is not None:
            await http_client.aclose()
            logger.debug("Closed ElevenLabs HTTP client")

    async def speak(self, text: str, voice: str = None, model: str = None,
                    **options: Any) -> AudioFile:
        """Synthesize ``text`` to speech.

        Args:
            text: The text to convert to speech
            voice: Voice name or raw voice id (default: config voice)
            model: Model name or raw model id (default: config model)
            **options: Passed through to ``text_to_speech.convert``

        Returns:
            AudioFile: ``speech.mp3`` holding the synthesized audio
        """
        voice_id = resolve_voice(
            voice if voice is not None else self.config.voice
        )
        model_id = resolve_model(
            model if model is not None else self.config.model
        )
        logger.info("Text to speech: %d chars, voice=%s, model=%s",
                    len(text), voice_id, model_id)

        try:
            stream = self.client.text_to_speech.convert(
                voice_id,
                text=text,
                model_id=model_id,
                **options
            )
            data = await collect_audio(stream)
        except Exception as e:
            logger.error("Text to speech failed: %s", str(e))
            raise

        return AudioFile(data, SPEECH_FILENAME)

    async def convert(self, audio: Any, voice: str = None, model: str = None,
                      **options: Any) -> AudioFile:
        """Convert speech in ``audio`` into another voice.

        Args:
            audio: Source speech as a binary file object or bytes
            voice: Target voice name or raw voice id (default: config voice)
            model: Model name or raw model id (default: config sts_model)
            **options: Passed through to ``speech_to_speech.convert``;
                ``output_format`` here overrides the configured one

        Returns:
            AudioFile: ``converted-speech.mp3`` holding the converted audio
        """
        voice_id = resolve_voice(
            voice if voice is not None else self.config.voice
        )
        model_id = resolve_model(
            model if model is not None else self.config.sts_model
        )
        params = {'output_format': self.config.output_format}
        params.update(options)
        logger.info("Speech to speech: voice=%s, model=%s, format=%s",
                    voice_id, model_id, params['output_format'])

        try:
            stream = self.client.speech_to_speech.convert(
                voice_id,
                audio=audio,
                model_id=model_id,
                **params
            )
            data = await collect_audio(stream)
        except Exception as e:
            logger.error("Speech to speech failed: %s", str(e))
            raise

        return AudioFile(data, CONVERTED_SPEECH_FILENAME)

    async def isolate(self, audio: Any, **options: Any) -> AudioFile:
        """Isolate speech from background noise in ``audio``.

        Returns:
            AudioFile: ``isolated-speech.mp3`` holding the isolated speech
        """
        logger.info("Isolating speech")

        try:
            stream = self.client.audio_isolation.convert(
                audio=audio, **options
            )
            data = await collect_audio(stream)
        except Exception as e:
            logger.error("Speech isolation failed: %s", str(e))
            raise

        return AudioFile(data, ISOLATED_SPEECH_FILENAME)

    def list_speakers(self) -> List[str]:
        return list(VOICES)

    def list_models(self) -> List[str]:
        return list(MODELS)
