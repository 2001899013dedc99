"""
Dependency Injection Container.

This module provides a simple DI container for managing interface implementations.
"""

from typing import Any, Callable, Dict, Type, TypeVar

from core.logger import logger

T = TypeVar("T")


class Container:
    """
    Simple Dependency Injection Container.

    Supports:
    - Singleton instances (register)
    - Factory functions (register_factory)
    - Interface resolution (resolve)
    """

    _instances: Dict[Type, Any] = {}
    _providers: Dict[Type, Callable[[], Any]] = {}
    _initialized: bool = False

    @classmethod
    def register(cls, interface: Type[T], instance: Any) -> None:
        """
        Register a singleton instance for an interface.

        Args:
            interface: The interface type (e.g., IAudioDownloader)
            instance: The implementation instance
        """
        cls._instances[interface] = instance

    @classmethod
    def register_factory(cls, interface: Type[T], factory: Callable[[], T]) -> None:
        """
        Register a factory function for an interface.
        Factory is called each time resolve() is called.

        Args:
            interface: The interface type
            factory: Factory function that returns an implementation
        """
        cls._providers[interface] = factory

    @classmethod
    def resolve(cls, interface: Type[T]) -> T:
        """
        Resolve an interface to its implementation.

        Raises:
            KeyError: If no implementation is registered for the interface
        """
        if interface in cls._instances:
            return cls._instances[interface]
        if interface in cls._providers:
            return cls._providers[interface]()
        raise KeyError(f"No provider registered for {interface.__name__}")

    @classmethod
    def is_registered(cls, interface: Type[T]) -> bool:
        """Check if an interface has a registered implementation."""
        return interface in cls._instances or interface in cls._providers

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations (useful for testing)."""
        cls._instances.clear()
        cls._providers.clear()
        cls._initialized = False

    @classmethod
    def is_initialized(cls) -> bool:
        """Check if container has been bootstrapped."""
        return cls._initialized

    @classmethod
    def _mark_initialized(cls) -> None:
        cls._initialized = True


def bootstrap_container() -> None:
    """
    Initialize the dependency injection container.

    Registers all interface implementations:
    - IAudioDownloader -> YtDlpAudioDownloader
    - IAudioProcessor -> HttpAudioProcessorClient
    - SampleService -> SampleService (with injected dependencies)

    This function is idempotent - calling it multiple times has no effect
    after the first successful initialization.
    """
    if Container.is_initialized():
        return

    logger.info("Bootstrapping dependency injection container...")

    try:
        from interfaces.audio_downloader import IAudioDownloader
        from interfaces.audio_processor import IAudioProcessor

        from infrastructure.http.audio_processor_client import get_audio_processor_client
        from infrastructure.ytdlp.audio_downloader import get_ytdlp_audio_downloader

        from services.sampling import SampleService, get_sample_service

        Container.register_factory(IAudioDownloader, get_ytdlp_audio_downloader)
        logger.info("Registered IAudioDownloader -> YtDlpAudioDownloader (factory)")

        Container.register_factory(IAudioProcessor, get_audio_processor_client)
        logger.info("Registered IAudioProcessor -> HttpAudioProcessorClient (factory)")

        def create_sample_service() -> SampleService:
            return get_sample_service(
                audio_downloader=Container.resolve(IAudioDownloader),
                audio_processor=Container.resolve(IAudioProcessor),
            )

        Container.register_factory(SampleService, create_sample_service)
        logger.info("Registered SampleService with DI (factory)")

        Container._mark_initialized()
        logger.info("Dependency injection container bootstrapped successfully")

    except Exception as e:
        logger.error(f"Failed to bootstrap container: {e}")
        logger.exception("Container bootstrap error details:")
        raise


def get_audio_downloader():
    """Get IAudioDownloader implementation from container."""
    from interfaces.audio_downloader import IAudioDownloader

    if not Container.is_initialized():
        bootstrap_container()

    return Container.resolve(IAudioDownloader)


def get_audio_processor():
    """Get IAudioProcessor implementation from container."""
    from interfaces.audio_processor import IAudioProcessor

    if not Container.is_initialized():
        bootstrap_container()

    return Container.resolve(IAudioProcessor)


def get_sample_service():
    """Get SampleService from container."""
    from services.sampling import SampleService

    if not Container.is_initialized():
        bootstrap_container()

    return Container.resolve(SampleService)
