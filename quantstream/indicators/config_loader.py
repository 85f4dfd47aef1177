"""Indicator configuration loading helpers.

Resolves configuration definitions (existing models, plain mappings, or YAML
files) into validated indicator configs. The caller always names the config
class it expects; there is no lookup by indicator name.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any, TypeVar

import yaml

from quantstream.core.logger import get_quantstream_logger

from .base_indicator import build_config
from .indicator_configs import IndicatorConfig

ConfigT = TypeVar('ConfigT', bound=IndicatorConfig)

logger = get_quantstream_logger(__name__)

_OVERRIDE_KEYS = frozenset({'config_path', 'overrides'})


class ConfigSourceError(RuntimeError):
    """Raised when a config source cannot be resolved."""


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Read a YAML file and return its mapping payload."""
    resolved_path = Path(path).expanduser()
    if not resolved_path.is_file():
        raise ConfigSourceError(f"Config file not found: {resolved_path}")

    with resolved_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    if not isinstance(data, MutableMapping):
        raise ConfigSourceError(f"YAML root must be a mapping: {resolved_path}")

    return dict(data)


def load_indicator_config(config_cls: type[ConfigT], definition: Any) -> ConfigT:
    """Resolve ``definition`` into a validated ``config_cls`` instance.

    Args:
        config_cls: Expected configuration model
        definition: A ``config_cls`` instance, a mapping of field values, or a
            path to a ``.yaml``/``.yml`` file. Mappings may point at a file via
            ``config_path`` and tweak it with inline keys or an ``overrides``
            section.

    Returns:
        Validated configuration

    Raises:
        ConfigSourceError: If a file cannot be found or holds another config class
        IndicatorError: If the resolved values fail validation
        TypeError: If ``definition`` has an unsupported type
    """
    if isinstance(definition, config_cls):
        return definition

    if isinstance(definition, Mapping):
        payload = _resolve_mapping(config_cls, definition)
    elif isinstance(definition, (str, Path)):
        payload = _load_file(config_cls, definition)
    else:
        raise TypeError(
            "Indicator definitions must be a config model, a mapping, or a YAML path",
        )

    logger.debug(f"Resolved {config_cls.__name__} from {type(definition).__name__}")
    return build_config(config_cls, **payload)


def _resolve_mapping(config_cls: type[IndicatorConfig], definition: Mapping[str, Any]) -> dict[str, Any]:
    config_path = definition.get('config_path')
    payload = _load_file(config_cls, config_path) if config_path else {}

    payload.update({key: value for key, value in definition.items() if key not in _OVERRIDE_KEYS})
    overrides = definition.get('overrides') or {}
    if isinstance(overrides, Mapping):
        payload.update(overrides)
    _check_config_class(config_cls, payload.pop('__config_class__', None), "mapping")
    return payload


def _load_file(config_cls: type[IndicatorConfig], identifier: str | Path) -> dict[str, Any]:
    path = _resolve_path(identifier)
    data = load_yaml(path)
    _check_config_class(config_cls, data.pop('__config_class__', None), f"file={path}")
    return data


def _check_config_class(config_cls: type[IndicatorConfig], meta: Any, source: str) -> None:
    if meta is not None and meta != config_cls.__name__:
        raise ConfigSourceError(
            f"Expected {config_cls.__name__} payload, received {meta} ({source})",
        )


def _resolve_path(identifier: str | Path) -> Path:
    raw = Path(identifier).expanduser()
    if raw.suffix.lower() in {'.yml', '.yaml'}:
        candidates = [raw]
    else:
        candidates = [raw.with_suffix('.yaml'), raw.with_suffix('.yml')]

    for candidate in candidates:
        if candidate.is_file():
            return candidate

    raise ConfigSourceError(f"Indicator config file not found: {identifier}")
