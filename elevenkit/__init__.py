"""elevenkit: convenience wrappers around the ElevenLabs speech API."""

from elevenkit.speech.elevenlabs import elevenlabs, tts, sts, isl

__all__ = ['elevenlabs', 'tts', 'sts', 'isl']
