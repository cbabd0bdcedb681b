"""
Render Parameter Resolution

Builds the RenderParameters record from three layers, later ones overriding
earlier ones:

    1. Built-in defaults (RenderParameters field defaults)
    2. An optional YAML config file
    3. Options given explicitly on the command line

Examples:
    >>> resolve_parameters()
    RenderParameters(margin='1cm', ...)

    >>> resolve_parameters(Path("configs/dotted.yaml"), {"line_color": "blue"})
"""

import dataclasses
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from gridpaper.contexts.templating.exceptions import ConfigurationError
from gridpaper.contexts.templating.logger import _log_debug, _log_info
from gridpaper.contexts.templating.parameters import RenderParameters


def _schema() -> DictConfig:
    """Typed, struct-mode config holding the default parameters."""
    schema = OmegaConf.structured(RenderParameters)
    # Frozen dataclasses come back read-only; merging needs a writable target
    OmegaConf.set_readonly(schema, False)
    OmegaConf.set_struct(schema, True)
    return schema


def load_parameter_file(config_path: Path) -> DictConfig:
    """
    Load a YAML file of parameter values.

    Args:
        config_path: Path to the YAML file (flat mapping of parameter names)

    Returns:
        The loaded mapping

    Raises:
        ConfigurationError: If the file is missing, unparsable, or not a mapping
    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigurationError("Config file not found", config_path=config_path)

    try:
        loaded = OmegaConf.load(config_path)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot parse config file: {e}", config_path=config_path) from e

    if loaded is None or (isinstance(loaded, DictConfig) and len(loaded) == 0):
        return OmegaConf.create({})
    if not isinstance(loaded, DictConfig):
        raise ConfigurationError(
            "Config file must contain a mapping of parameter names to values",
            config_path=config_path,
        )
    return loaded


def resolve_parameters(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> RenderParameters:
    """
    Resolve the final render parameters.

    Args:
        config_path: Optional YAML file with parameter values
        overrides: Parameter values given explicitly (None values are ignored)

    Returns:
        Fully populated RenderParameters

    Raises:
        ConfigurationError: On unknown keys or values of the wrong type
    """
    layers = [_schema()]

    if config_path is not None:
        layers.append(load_parameter_file(config_path))
        _log_info(f"Loaded parameters from {config_path}")

    try:
        merged = OmegaConf.merge(*layers)
        values = OmegaConf.to_container(merged, resolve=True)
    except OmegaConfBaseException as e:
        raise ConfigurationError(
            f"Invalid render parameters: {e}",
            config_path=config_path,
        ) from e

    params = RenderParameters(**values)

    # Command line values bypass OmegaConf so "${...}" reaches the template verbatim
    explicit = {key: value for key, value in (overrides or {}).items() if value is not None}
    if explicit:
        try:
            params = dataclasses.replace(params, **explicit)
        except TypeError as e:
            raise ConfigurationError(f"Invalid render parameters: {e}") from e

    _log_debug(f"Resolved parameters: {params}")
    return params
