"""Factory functions for creating translation components.

Provides convenience functions for building a TemplateRegistry from
application settings.
"""

from pathlib import Path
from typing import Iterable, Optional

from errorlingo.configuration import Settings
from errorlingo.logging import get_module_logger
from errorlingo.translation.loader import YAMLTemplateLoader
from errorlingo.translation.registry import TemplateRegistry

logger = get_module_logger()

DEFAULT_CATALOG_DIR = Path(__file__).resolve().parents[1] / "catalogs"


def create_registry(
    settings: Optional[Settings] = None,
    languages: Optional[Iterable[str]] = None,
    catalog_dir: Optional[Path] = None,
    preload: bool = True,
) -> TemplateRegistry:
    """Create and configure a TemplateRegistry.

    Args:
        settings: Settings to read defaults from (default: load from env).
        languages: Ordered language codes (default: settings.translation.languages).
        catalog_dir: YAML catalog directory (default: settings, then the
            bundled catalogs).
        preload: Whether to load the catalog directory immediately.

    Returns:
        TemplateRegistry: Configured registry.

    Raises:
        ValueError: If the catalog directory does not exist.

    Usage:
        # Defaults from environment, bundled catalogs
        registry = create_registry()

        # Empty registry for programmatic registration
        registry = create_registry(languages=["en", "nb"], preload=False)
    """
    settings = settings or Settings()
    languages = tuple(languages) if languages is not None else settings.translation.languages

    registry = TemplateRegistry(
        languages,
        require_full_match=settings.matching.REQUIRE_FULL_MATCH,
    )

    if not preload:
        logger.info("registry_created_empty", language_count=len(languages))
        return registry

    catalog_dir = catalog_dir or settings.translation.CATALOG_DIR or DEFAULT_CATALOG_DIR
    loader = YAMLTemplateLoader(catalog_dir)
    loader.load_into(registry)
    logger.info(
        "registry_created_with_preload",
        catalog_dir=str(catalog_dir),
        template_count=len(registry),
    )
    return registry
