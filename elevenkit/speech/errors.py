class ElevenLabsError(Exception):
    """Base exception for ElevenLabs-related errors"""
    pass

class ElevenLabsConfigError(ElevenLabsError, ValueError):
    """Raised when ElevenLabs configuration is invalid or missing"""
    pass
