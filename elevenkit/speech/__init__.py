"""Speech module for text-to-speech, speech-to-speech and isolation.

This module provides a high-level interface for speech operations backed
by the ElevenLabs API. Importing it registers the ElevenLabs provider.
"""

from elevenkit.speech import elevenlabs_provider  # noqa: F401
