"""Base provider for speech services.

This module provides the base infrastructure for implementing speech providers.
It defines the base classes for configuration and providers, and the
registry that ties a configuration class to its provider.
"""

import logging
from typing import Any, Dict, List
from dataclasses import dataclass
from abc import ABC, abstractmethod

from elevenkit.speech.audio import AudioFile

logger = logging.getLogger(__name__)

# Provider registry
_registered_providers: Dict[str, type] = {}
_registered_configs: Dict[str, type] = {}


def register_provider(name: str):
    """Decorator to register a speech provider.

    Args:
        name: The name of the provider to register.
    """
    def decorator(cls):
        _registered_providers[name] = cls
        logger.debug("Registered provider: %s", name)
        return cls
    return decorator


def register_config(name: str):
    """Decorator to register a speech config.

    Args:
        name: The name of the config to register.
    """
    def decorator(cls):
        _registered_configs[name] = cls
        logger.debug("Registered config: %s", name)
        return cls
    return decorator


def list_providers() -> List[str]:
    """Names of all registered providers."""
    return sorted(_registered_providers)


def create_provider(config: 'BaseSpeechConfig') -> 'BaseSpeechProvider':
    """Instantiate the provider registered alongside a config class.

    Args:
        config: Provider configuration instance.

    Returns:
        BaseSpeechProvider: Initialized provider instance.

    Raises:
        ValueError: If no provider is registered for the config class.
    """
    for name, config_class in _registered_configs.items():
        if type(config) is config_class and name in _registered_providers:
            provider_class = _registered_providers[name]
            logger.debug("Creating provider %s for config %s",
                         provider_class.__name__, config_class.__name__)
            return provider_class(config)
    raise ValueError(
        f"No provider registered for config {config.__class__.__name__}"
    )


@dataclass
class BaseSpeechConfig:
    """Base configuration for speech providers.

    This class should be inherited by all provider-specific configurations.
    Each provider should implement its own configuration class with
    necessary settings.
    """

    def validate(self) -> bool:
        """Validate configuration parameters.

        Raises:
            ValueError: If configuration is invalid.
        """
        raise NotImplementedError("validate() must be implemented")

    @classmethod
    def from_env(cls) -> 'BaseSpeechConfig':
        """Create configuration from environment variables.

        Returns:
            BaseSpeechConfig: Configuration instance.
        """
        raise NotImplementedError("from_env() must be implemented")


class BaseSpeechProvider(ABC):
    """Base class for speech providers.

    All operations are coroutines returning a fully buffered
    ``AudioFile``.
    """

    def __init__(self, config: BaseSpeechConfig):
        """Initialize the provider.

        Args:
            config: Provider configuration.
        """
        logger.info("Initializing %s", self.__class__.__name__)
        self.config = config

    async def aclose(self) -> None:
        """Release resources held by the provider."""

    async def __aenter__(self) -> 'BaseSpeechProvider':
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @abstractmethod
    async def speak(self, text: str, voice: str = None, model: str = None,
                    **options: Any) -> AudioFile:
        """Convert text to speech.

        Args:
            text: Text to convert.
            voice: Voice name or raw voice id.
            model: Model name or raw model id.
            **options: Additional provider-specific arguments.

        Returns:
            AudioFile: The synthesized audio.
        """
        pass

    @abstractmethod
    async def convert(self, audio: Any, voice: str = None, model: str = None,
                      **options: Any) -> AudioFile:
        """Convert speech into another voice.

        Args:
            audio: Binary file object or bytes holding the source speech.
            voice: Target voice name or raw voice id.
            model: Model name or raw model id.
            **options: Additional provider-specific arguments.

        Returns:
            AudioFile: The converted audio.
        """
        pass

    @abstractmethod
    async def isolate(self, audio: Any, **options: Any) -> AudioFile:
        """Remove background noise, keeping only the speech.

        Args:
            audio: Binary file object or bytes holding the source audio.

        Returns:
            AudioFile: The isolated speech.
        """
        pass

    @abstractmethod
    def list_speakers(self) -> List[str]:
        """List available speakers/voices."""
        pass

    @abstractmethod
    def list_models(self) -> List[str]:
        """List available models."""
        pass
