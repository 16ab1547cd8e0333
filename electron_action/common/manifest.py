"""
action.yml parsing
Provides declared input defaults for runs outside the Actions runner
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from electron_action.common.errors import ConfigurationError


class ActionManifest:
    """Input declarations read from an action.yml file"""

    def __init__(self, data: Dict[str, Any], path: Optional[Path] = None,
                 logger: Optional[logging.Logger] = None):
        self.data = data
        self.path = path
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def load(cls, path: Union[str, Path], logger: Optional[logging.Logger] = None) -> "ActionManifest":
        """
        Load and parse an action.yml file

        Args:
            path: Path to action.yml
            logger: Optional logger instance

        Returns:
            ActionManifest instance

        Raises:
            ConfigurationError: If the file is missing or is not valid YAML
        """
        manifest_path = Path(path)
        try:
            with open(manifest_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Action manifest not found at path \"{manifest_path}\"")
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {manifest_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Action manifest {manifest_path} must be a mapping")

        return cls(data, manifest_path, logger)

    @property
    def inputs(self) -> Dict[str, Dict[str, Any]]:
        """Declared inputs, keyed by name"""
        return self.data.get('inputs') or {}

    def defaults(self) -> Dict[str, str]:
        """
        Default values of all inputs that declare one

        Returns:
            Mapping of input name to default, stringified the way the runner passes it
        """
        result = {}
        for name, spec in self.inputs.items():
            if isinstance(spec, dict) and 'default' in spec and spec['default'] is not None:
                value = spec['default']
                if isinstance(value, bool):
                    value = 'true' if value else 'false'
                result[name] = str(value)
        return result

    def is_required(self, name: str) -> bool:
        spec = self.inputs.get(name) or {}
        return bool(spec.get('required', False))

    def deprecation_message(self, name: str) -> Optional[str]:
        """deprecationMessage declared for an input, if any"""
        spec = self.inputs.get(name) or {}
        message = spec.get('deprecationMessage')
        return str(message) if message else None

    def step_env(self) -> Dict[str, str]:
        """Environment mapping of every composite run step, merged"""
        env: Dict[str, str] = {}
        runs = self.data.get('runs') or {}
        steps: List[Dict[str, Any]] = runs.get('steps') or []
        for step in steps:
            if isinstance(step, dict):
                env.update({str(k): str(v) for k, v in (step.get('env') or {}).items()})
        return env
