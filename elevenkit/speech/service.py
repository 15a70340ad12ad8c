"""Speech service layer implementation.

This module provides the SpeechService class which offers a file-path
oriented interface over a speech provider. Results are buffered in memory
by the provider and written to disk once the call has completed.
"""

import logging
from typing import Any, List, Optional

from elevenkit.speech.provider import BaseSpeechConfig, create_provider

logger = logging.getLogger(__name__)


class SpeechService:
    """Speech service layer.

    This class provides a high-level interface for speech operations,
    reading inputs from and writing outputs to the local filesystem.
    """

    def __init__(self, config: BaseSpeechConfig):
        """Initialize speech service.

        Args:
            config: Provider configuration instance.
        """
        logger.debug("Initializing SpeechService with config: %s",
                     config.__class__.__name__)
        self.config = config
        self.provider = create_provider(config)
        logger.info("Provider initialized: %s",
                    self.provider.__class__.__name__)

    async def text_to_speech(
        self,
        text: str,
        output_path: str,
        voice: Optional[str] = None,
        model: Optional[str] = None,
        **options: Any
    ) -> str:
        """Convert text to speech and save it.

        Args:
            text: Text to convert
            output_path: Path to save the audio file
            voice: Voice name or raw voice id
            model: Model name or raw model id
            **options: Provider-specific arguments

        Returns:
            str: Path to the generated audio file

        Raises:
            ValueError: If text is empty
        """
        if not text or not text.strip():
            raise ValueError("Text must not be empty")

        logger.info("Starting text-to-speech conversion")
        logger.debug("Input text length: %d characters", len(text))
        async with self.provider as provider:
            audio = await provider.speak(text, voice=voice, model=model,
                                         **options)
        return audio.save(output_path)

    async def speech_to_speech(
        self,
        audio_path: str,
        output_path: str,
        voice: Optional[str] = None,
        model: Optional[str] = None,
        **options: Any
    ) -> str:
        """Convert the speech in an audio file into another voice.

        Args:
            audio_path: Path to the source audio file
            output_path: Path to save the converted audio
            voice: Target voice name or raw voice id
            model: Model name or raw model id
            **options: Provider-specific arguments

        Returns:
            str: Path to the converted audio file
        """
        logger.info("Starting speech-to-speech conversion: %s", audio_path)
        with open(audio_path, 'rb') as f:
            async with self.provider as provider:
                audio = await provider.convert(f, voice=voice, model=model,
                                               **options)
        return audio.save(output_path)

    async def isolate_speech(self, audio_path: str, output_path: str) -> str:
        """Isolate the speech in an audio file.

        Args:
            audio_path: Path to the source audio file
            output_path: Path to save the isolated speech

        Returns:
            str: Path to the isolated speech file
        """
        logger.info("Starting speech isolation: %s", audio_path)
        with open(audio_path, 'rb') as f:
            async with self.provider as provider:
                audio = await provider.isolate(f)
        return audio.save(output_path)

    def list_speakers(self) -> List[str]:
        return self.provider.list_speakers()

    def list_models(self) -> List[str]:
        return self.provider.list_models()
