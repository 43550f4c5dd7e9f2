"""Load options from YAML files and the environment and layer them together."""

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from youbora_options import constants
from youbora_options.options import ConfigurationOptions, merge

logger = logging.getLogger(__name__)


def options_from_mapping(data: Mapping[str, Any] | None) -> ConfigurationOptions:
    """Build options where only the keys present in `data` count as set.

    Keys may be camelCase option names or snake_case attribute names. Keys
    with a null value are left unset.

    Raises:
        pydantic.ValidationError: On unknown keys or mistyped values
    """
    if not data:
        return ConfigurationOptions()
    return ConfigurationOptions.model_validate(
        {key: value for key, value in data.items() if value is not None}
    )


def load_options_file(path: Path) -> ConfigurationOptions:
    """Load options from a YAML file.

    An empty file gives options with nothing set.

    Raises:
        OSError: If the file can't be read
        yaml.YAMLError: If the file isn't valid YAML
        ValueError: If the document isn't a mapping
        pydantic.ValidationError: On unknown keys or mistyped values
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is not None and not isinstance(data, dict):
        raise ValueError(
            f"{path}: expected a mapping of options, got {type(data).__name__}"
        )

    return options_from_mapping(data)


def options_from_env(environ: Mapping[str, str] | None = None) -> ConfigurationOptions:
    if environ is None:
        environ = os.environ

    account_code = environ.get(constants.ACCOUNT_CODE_ENV_VAR)
    if account_code:
        return ConfigurationOptions(account_code=account_code)
    return ConfigurationOptions()


def load_layered(
    paths: Iterable[Path], environ: Mapping[str, str] | None = None
) -> ConfigurationOptions:
    """Merge the options files in order, then the environment on top.

    Args:
        paths: YAML files, each one overriding the ones before it
        environ: Environment to read from, `os.environ` when not given

    Returns:
        ConfigurationOptions: The resolved options
    """
    options = ConfigurationOptions()

    for path in paths:
        logger.info("Loading options from %s", path)
        options = merge(options, load_options_file(path))

    env_options = options_from_env(environ)
    if env_options.explicit_fields():
        logger.info(
            "Overriding options from environment: %s",
            ", ".join(sorted(env_options.explicit_fields())),
        )

    return merge(options, env_options)
