"""Voice and model tables for the ElevenLabs API.

Maps human-readable names to the opaque identifiers the vendor expects.
"""

from types import MappingProxyType
from typing import Mapping, Optional

VOICES: Mapping[str, str] = MappingProxyType({
    'alice': 'Xb7hH8MSUJpSbSDYk0k2',
    'aria': '9BWtsMINqrJLrRacOk9x',
    'bill': 'pqHfZKP75CvOlQylNhV4',
    'brian': 'nPczCjzI2devNBz1zQrb',
    'callum': 'N2lVS1w4EtoT3dr4eOWO',
    'charlie': 'IKne3meq5aSn9XLyUdCD',
    'charlotte': 'XB0fDUnXU5powFXDhCwa',
    'chris': 'iP95p4xoKVk53GoZ742B',
    'daniel': 'onwK4e9ZLuTAKqWW03F9',
    'eric': 'cjVigY5qzO86Huf0OWal',
    'george': 'JBFqnCBsd6RMkjVDRZzb',
    'jessica': 'cgSgspJ2msm6clMCkdW9',
    'laura': 'FGY2WhTYpPnrIDTdsKH5',
    'liam': 'TX3LPaxmHKxFdv7VOQHJ',
    'lily': 'pFZP5JQG7iQjIQuC4Bku',
    'matilda': 'XrExE9yKIg1WjnnlVkGX',
    'river': 'SAz9YHcvj6GT2YYXdXww',
    'roger': 'CwhRBWXzGAHq8TQ4Fs17',
    'sarah': 'EXAVITQu4vr4xnSDxMaL',
    'will': 'bIHbv24MWmeRgasZH58o',
})

MODELS: Mapping[str, str] = MappingProxyType({
    'multilingual_v2': 'eleven_multilingual_v2',
    'flash_v2_5': 'eleven_flash_v2_5',
    'flash_v2': 'eleven_flash_v2',
    'turbo_v2': 'eleven_turbo_v2',
    'turbo_v2_5': 'eleven_turbo_v2_5',
    'multilingual_sts_v2': 'eleven_multilingual_sts_v2',
    'english_sts_v2': 'eleven_english_sts_v2',
})

DEFAULT_VOICE = 'aria'
DEFAULT_MODEL = 'multilingual_v2'
DEFAULT_STS_MODEL = 'eleven_multilingual_sts_v2'


def resolve_voice(voice: Optional[str]) -> str:
    """Resolve a voice name to a vendor voice id.

    Unknown names are treated as raw voice ids and returned unchanged.

    Raises:
        ValueError: If voice is empty.
    """
    if not voice:
        raise ValueError("voice must not be empty")
    return VOICES.get(voice, voice)


def resolve_model(model: Optional[str]) -> str:
    """Resolve a model name to a vendor model id.

    Unknown names are treated as raw model ids and returned unchanged.

    Raises:
        ValueError: If model is empty.
    """
    if not model:
        raise ValueError("model must not be empty")
    return MODELS.get(model, model)
