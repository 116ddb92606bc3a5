import yaml
import os
import re
from dataclasses import dataclass, field, replace
from typing import Optional, Any

from json2ts.core.exceptions import ConfigError


DEFAULT_CONFIG_PATH = "json2ts.yml"


def _substitute_env_vars(value: Any) -> Any:
    """Substitute ${VAR} patterns with environment variables."""
    if isinstance(value, str):
        pattern = r'\$\{([^}]+)\}'
        matches = re.findall(pattern, value)
        for var_name in matches:
            env_value = os.environ.get(var_name, "")
            value = value.replace(f"${{{var_name}}}", env_value)
        return value
    elif isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_substitute_env_vars(v) for v in value]
    return value


@dataclass
class ConversionConfig:
    """Options controlling how records are inferred and rendered."""
    as_class: bool = False  # Emit classes with a constructor instead of interfaces
    union_null: bool = False  # Type null fields as `null` instead of optional `any`
    prefix: str = ""  # Prepended to every generated record name, Root included

    def merged(self, **overrides: Any) -> "ConversionConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


@dataclass
class ProjectConfig:
    """Contents of a json2ts.yml project file."""
    conversion: ConversionConfig = field(default_factory=ConversionConfig)
    output: Optional[str] = None  # Default output path for `json2ts convert`


DEFAULT_CONFIG = """# json2ts Configuration
# Command-line flags override these values.

conversion:
  as_class: false      # emit classes with a constructor
  union_null: false    # type null fields as `null` instead of optional `any`
  prefix: ""           # prepended to every generated type name

# output: types.ts     # write here instead of stdout
"""


def load_config(path: str = DEFAULT_CONFIG_PATH) -> ProjectConfig:
    """Loads configuration from a YAML file.

    Args:
        path: Path to the config file

    Returns:
        Parsed ProjectConfig object

    Raises:
        ConfigError: If config file is missing, invalid YAML, or has invalid fields
    """
    if not os.path.exists(path):
        raise ConfigError(
            f"Configuration file not found: {path}\n"
            f"Run 'json2ts init' to create one."
        )

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML in {path}:\n{e}"
        )

    if data is None:
        raise ConfigError(f"Config file {path} is empty.")

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping.")

    # Substitute environment variables
    data = _substitute_env_vars(data)

    conversion = _parse_conversion(data.get("conversion"))

    output = data.get("output")
    if output is not None and not isinstance(output, str):
        raise ConfigError("'output' must be a file path string.")

    return ProjectConfig(conversion=conversion, output=output)


def load_config_if_present(path: Optional[str] = None) -> ProjectConfig:
    """Load an explicit config file, or the default one if it exists.

    An explicitly requested file must exist; the default path is optional.
    """
    if path:
        return load_config(path)
    if os.path.exists(DEFAULT_CONFIG_PATH):
        return load_config(DEFAULT_CONFIG_PATH)
    return ProjectConfig()


def _parse_bool(value: Any, name: str) -> bool:
    """Accept YAML booleans and the strings env substitution produces."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "yes", "1", "false", "no", "0", ""):
        return value.strip().lower() in ("true", "yes", "1")
    raise ConfigError(f"'conversion.{name}' must be true or false, got {value!r}.")


def _parse_conversion(data: Optional[dict]) -> ConversionConfig:
    """Parse the conversion section."""
    if data is None:
        return ConversionConfig()

    if not isinstance(data, dict):
        raise ConfigError(
            "'conversion' must be a mapping.\n"
            "Example:\n\n"
            "conversion:\n"
            "  as_class: true\n"
            "  prefix: I"
        )

    unknown = set(data) - {"as_class", "union_null", "prefix"}
    if unknown:
        raise ConfigError(
            f"Unknown conversion option(s): {', '.join(sorted(unknown))}. "
            "Valid options: as_class, union_null, prefix"
        )

    prefix = data.get("prefix", "")
    if prefix is None:
        prefix = ""
    if not isinstance(prefix, str):
        raise ConfigError(f"'conversion.prefix' must be a string, got {prefix!r}.")

    return ConversionConfig(
        as_class=_parse_bool(data.get("as_class", False), "as_class"),
        union_null=_parse_bool(data.get("union_null", False), "union_null"),
        prefix=prefix,
    )
