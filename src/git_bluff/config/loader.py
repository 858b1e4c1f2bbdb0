"""YAML loading of the project-mapping file."""

import logging
from pathlib import Path
from typing import Any, Union

import yaml

from ..errors import ConfigParseError, handle_yaml_error
from .schema import Project, ProjectMapping, RepositoryEntry

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load and validate the project-mapping configuration.

    Expected layout::

        projects:
          - project_name: Billing
            project_code: BIL
            repositories:
              - alias: billing-api
                repo_path: /work/billing/api
    """

    @classmethod
    def load(cls, config_path: Union[Path, str]) -> ProjectMapping:
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the configuration file

        Returns:
            The loaded, immutable project mapping

        Raises:
            ConfigParseError: If the file cannot be read, is not valid YAML or
                does not follow the expected layout
        """
        config_path = Path(config_path)
        data = cls._load_yaml(config_path)

        if not isinstance(data, dict):
            raise ConfigParseError(
                f"Configuration file {config_path} must contain a mapping with a 'projects' key",
                config_path,
            )

        projects_data = data.get("projects")
        if not isinstance(projects_data, list):
            raise ConfigParseError(
                f"'projects' in {config_path} must be a list", config_path
            )

        projects = tuple(
            cls._process_project(project_data, index, config_path)
            for index, project_data in enumerate(projects_data)
        )
        mapping = ProjectMapping(projects=projects)

        repo_count = sum(len(p.repositories) for p in projects)
        logger.info(
            f"Loaded {len(projects)} projects with {repo_count} repositories from {config_path}"
        )
        return mapping

    @classmethod
    def _load_yaml(cls, config_path: Path) -> Any:
        try:
            with open(config_path, encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            handle_yaml_error(e, config_path)
        except OSError as e:
            raise ConfigParseError(
                f"Cannot read configuration file {config_path}: {e}", config_path
            ) from e

    @classmethod
    def _process_project(cls, data: Any, index: int, config_path: Path) -> Project:
        location = f"projects[{index}]"
        if not isinstance(data, dict):
            raise ConfigParseError(
                f"{location} in {config_path} must be a mapping", config_path
            )

        repositories_data = data.get("repositories")
        if not isinstance(repositories_data, list):
            raise ConfigParseError(
                f"{location}.repositories in {config_path} must be a list", config_path
            )

        repositories = []
        for repo_index, repo_data in enumerate(repositories_data):
            repo_location = f"{location}.repositories[{repo_index}]"
            if not isinstance(repo_data, dict):
                raise ConfigParseError(
                    f"{repo_location} in {config_path} must be a mapping", config_path
                )
            repositories.append(
                RepositoryEntry(
                    alias=cls._require_string(repo_data, "alias", repo_location, config_path),
                    repo_path=cls._require_string(
                        repo_data, "repo_path", repo_location, config_path
                    ),
                )
            )

        return Project(
            project_name=cls._require_string(data, "project_name", location, config_path),
            project_code=cls._require_string(data, "project_code", location, config_path),
            repositories=tuple(repositories),
        )

    @staticmethod
    def _require_string(data: dict, key: str, location: str, config_path: Path) -> str:
        value = data.get(key)
        # YAML turns codes like 2024 into ints; accept scalars and keep their text.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str) or not value.strip():
            raise ConfigParseError(
                f"{location}.{key} in {config_path} must be a non-empty string", config_path
            )
        return value.strip()
