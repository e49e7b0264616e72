"""Template catalog loading interface and implementations.

Defines the contract for populating a TemplateRegistry and provides a
YAML-based loader.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import yaml

from errorlingo.logging import get_module_logger
from errorlingo.translation.errors import CatalogError
from errorlingo.translation.registry import TemplateRegistry
from errorlingo.translation.transforms import value_synonyms

logger = get_module_logger()

CATALOG_SUFFIXES = (".yml", ".yaml")


class TemplateLoader(ABC):
    """Abstract base for template catalog loaders."""

    @abstractmethod
    def load_into(self, registry: TemplateRegistry) -> int:
        """Register catalog templates and translations into registry.

        Args:
            registry: Registry to populate. Templates are appended after
                any already registered ones.

        Returns:
            Number of templates registered.
        """
        pass


class YAMLTemplateLoader(TemplateLoader):
    """Loader for YAML template catalogs.

    Reads every ``*.yml`` / ``*.yaml`` file of a directory in sorted
    filename order, so file names double as match priority (e.g.
    ``10-network.yml`` before ``20-postgres.yml``). Expected format:

        templates:
          - pattern: 'dial tcp: lookup {{ host }}: no such host'
            translations:
              English: "Unable to resolve {{ host }}."
            value_translations:
              English:
                db: the database

    Attributes:
        catalog_dir: Directory containing catalog files.
    """

    def __init__(self, catalog_dir: Path):
        """Initialize YAML template loader.

        Args:
            catalog_dir: Directory with YAML catalog files.

        Raises:
            ValueError: If catalog_dir does not exist.
        """
        self.catalog_dir = Path(catalog_dir)

        if not self.catalog_dir.is_dir():
            raise ValueError(f"Catalog directory not found: {self.catalog_dir}")

        logger.info("initialized_yaml_loader", catalog_dir=str(self.catalog_dir))

    def catalog_files(self) -> List[Path]:
        """Catalog files in load order."""
        return sorted(
            path
            for path in self.catalog_dir.iterdir()
            if path.is_file() and path.suffix in CATALOG_SUFFIXES
        )

    def load_into(self, registry: TemplateRegistry) -> int:
        """Register all catalog files into registry.

        Raises:
            CatalogError: If a file cannot be parsed.
            UnknownLanguage: If a file names a language the registry lacks.
        """
        files = self.catalog_files()
        count = 0
        for path in files:
            count += self.load_file(path, registry)

        logger.info(
            "loaded_template_catalogs",
            catalog_dir=str(self.catalog_dir),
            file_count=len(files),
            template_count=count,
        )
        return count

    def load_file(self, path: Path, registry: TemplateRegistry) -> int:
        """Register the templates of a single catalog file.

        Raises:
            CatalogError: If the file cannot be read or parsed.
            UnknownLanguage: If the file names a language the registry lacks.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error("catalog_parse_error", file=str(path), error=str(e))
            raise CatalogError(f"Failed to load {path}: {e}") from e

        if data is None:
            return 0

        if not isinstance(data, dict) or not isinstance(data.get("templates"), list):
            logger.warning(
                "invalid_catalog_format",
                file=str(path),
                expected="mapping with a 'templates' list",
            )
            return 0

        count = 0
        for position, entry in enumerate(data["templates"]):
            if self._register_entry(registry, entry, path, position):
                count += 1
        return count

    def _register_entry(
        self,
        registry: TemplateRegistry,
        entry: Any,
        source_file: Path,
        position: int,
    ) -> bool:
        """Register one catalog entry. Returns False if it was skipped."""
        if not isinstance(entry, dict) or not isinstance(entry.get("pattern"), str):
            logger.warning(
                "invalid_template_entry",
                file=str(source_file),
                position=position,
                expected="mapping with a string 'pattern'",
            )
            return False

        translations: Dict[str, Any] = entry.get("translations") or {}
        value_translations: Dict[str, Any] = entry.get("value_translations") or {}
        if (
            not isinstance(translations, dict)
            or not isinstance(value_translations, dict)
            or not all(isinstance(text, str) for text in translations.values())
            or not all(isinstance(table, dict) for table in value_translations.values())
        ):
            logger.warning(
                "invalid_translations_format",
                file=str(source_file),
                position=position,
                expected="string renderings and mapping value_translations",
            )
            return False

        # Unknown languages fail before the template is appended.
        for language in list(translations) + list(value_translations):
            registry.language_index(str(language))

        template = registry.register(entry["pattern"])
        for language, text in translations.items():
            language = str(language)
            synonyms = value_translations.get(language)
            if synonyms:
                hook = value_synonyms({language: dict(synonyms)})
                template.set_with_transform(language, text, hook)
            else:
                template.set(language, text)

        return True
