"""Source registry for factory-based pipeline creation.

This module provides a central registry of line source factories so
callers (and the CLI) can build a pipeline by source name.
"""

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .pipeline import ManifestPipeline
    from .sources.base import LineSource


class SourceRegistry:
    """Central registry for line source factories.

    Sources register themselves when the ``sources`` package is imported.
    """

    _factories: dict[str, Callable[..., "LineSource"]] = {}

    @classmethod
    def register_factory(cls, name: str, factory: Callable[..., "LineSource"]) -> None:
        """Register a factory function for creating sources.

        Args:
            name: Name of the source (e.g., 'file', 'text')
            factory: Callable that creates a LineSource instance

        Example:
            >>> def create_zip_source(archive: Path, member: str) -> ZipLineSource:
            ...     return ZipLineSource(archive, member)
            >>> SourceRegistry.register_factory('zip', create_zip_source)
        """
        cls._factories[name] = factory

    @classmethod
    def create_source(cls, source_name: str, **kwargs) -> "LineSource":
        """Create a line source by name.

        Raises:
            ValueError: If source_name is not registered
        """
        if source_name not in cls._factories:
            available = ", ".join(cls._factories.keys()) or "none"
            raise ValueError(
                f"Unknown source: '{source_name}'. Available sources: {available}"
            )
        return cls._factories[source_name](**kwargs)

    @classmethod
    def create_pipeline(cls, source_name: str, **kwargs) -> "ManifestPipeline":
        """Create a pipeline from a registered source.

        Args:
            source_name: Name of the registered source
            **kwargs: Arguments passed to the source factory.
                     'full_validate' is extracted and passed to the pipeline.

        Returns:
            ManifestPipeline configured with the requested source

        Raises:
            ValueError: If source_name is not registered

        Example:
            >>> pipeline = SourceRegistry.create_pipeline(
            ...     'file',
            ...     path=Path('MyAddon.txt'),
            ...     full_validate=True
            ... )
        """
        # Import here to avoid circular dependency
        from .pipeline import ManifestPipeline

        full_validate = kwargs.pop("full_validate", False)
        source = cls.create_source(source_name, **kwargs)

        return ManifestPipeline(source, full_validate=full_validate)

    @classmethod
    def list_sources(cls) -> list[str]:
        """List all registered source names.

        Example:
            >>> SourceRegistry.list_sources()
            ['file', 'text']
        """
        return list(cls._factories.keys())
