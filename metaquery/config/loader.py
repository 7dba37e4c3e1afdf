"""Loads the query configuration and per-service schema files from disk."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from ..errors import ConfigLoadError
from .defaults import DefaultConfig, get_default_config
from .models import RunnerConfig

logger = structlog.get_logger(__name__)

DEFAULT_CONFIG_DIR = ".meta-templates"


@dataclass(frozen=True)
class ConfigLoader:
    """Reads query-config and schema documents (YAML or JSON)."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path.cwd() / DEFAULT_CONFIG_DIR

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def find_config_file(self) -> Path:
        """Locate the query config file, trying each known filename."""
        for filename in self.defaults.runner.config_filenames:
            candidate = self.config_dir / filename
            if candidate.exists():
                return candidate

        raise ConfigLoadError(
            f"No query config found in {self.config_dir} "
            f"(tried {', '.join(self.defaults.runner.config_filenames)})",
            path=str(self.config_dir),
        )

    def load(self) -> RunnerConfig:
        """
        Load the query config and the schema of every enabled service.

        Schemas of disabled services are never read. An enabled service whose
        schema file is missing is left without a schema; template entries that
        reference it fail the run when it starts.
        """
        config_path = self.find_config_file()
        config = self._read_document(config_path)

        schemas: dict[str, dict[str, Any]] = {}
        for service, service_config in (config.get("services") or {}).items():
            service_config = service_config or {}
            if not service_config.get("enabled"):
                continue

            schema_file = service_config.get("schema_file")
            if not schema_file:
                logger.warning("Enabled service has no schema_file", service=service)
                continue

            schema_path = self.config_dir / schema_file
            if not schema_path.exists():
                logger.warning(
                    "Schema file not found",
                    service=service,
                    path=str(schema_path)
                )
                continue

            schemas[service] = self._read_document(schema_path)

        logger.debug(
            "Configuration loaded",
            path=str(config_path),
            services=sorted(schemas),
            templates=len(config.get("query_templates") or {})
        )
        return RunnerConfig.from_dict(config, schemas)

    def _read_document(self, path: Path) -> dict[str, Any]:
        """Parse a YAML (or JSON, a YAML subset) mapping document."""
        try:
            with open(path, encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Malformed configuration file {path}: {e}", path=str(path)) from e
        except OSError as e:
            raise ConfigLoadError(f"Cannot read configuration file {path}: {e}", path=str(path)) from e

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ConfigLoadError(
                f"Configuration file {path} must contain a mapping, got {type(document).__name__}",
                path=str(path),
            )
        return document
