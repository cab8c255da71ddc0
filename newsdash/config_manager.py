"""Layered configuration for the news dashboard.

Each layer overrides the previous one, key by key:

1. defaults built into :mod:`newsdash.config_schema`
2. ``config.toml``
3. a ``.env`` file next to it
4. process environment variables

Environment keys are spelled ``NEWSDASH__<SECTION>__<KEY>``, for example
``NEWSDASH__APP__TIMEZONE=Europe/Madrid``. Every resolved key remembers the
layer it came from so ``--explain`` can answer "why is this value set?".
"""
from __future__ import annotations

import argparse
import os
import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple

from dotenv import dotenv_values
from pydantic import ValidationError

from newsdash.config_schema import DEFAULT_CONFIG, Config

DEFAULT_ENV_PREFIX = "NEWSDASH"
CONFIG_FILENAME = "config.toml"
ENV_FILENAME = ".env"


@dataclass(frozen=True)
class ConfigValueOrigin:
    """Where a single resolved key came from."""

    layer: str
    source: str
    env_var: Optional[str] = None

    def render(self) -> str:
        if self.env_var:
            return f"{self.layer} ({self.env_var} in {self.source})"
        return f"{self.layer} ({self.source})"


@dataclass
class ConfigMetadata:
    config_path: Path
    env_path: Optional[Path]
    env_prefix: str
    provenance: Dict[str, ConfigValueOrigin] = field(default_factory=dict)
    load_order: Tuple[str, ...] = ("defaults", "file", "env-file", "env")

    def describe_sources(self) -> list[str]:
        return [
            "defaults: newsdash.config_schema",
            f"config file: {self.config_path}"
            + ("" if self.config_path.exists() else " (not found)"),
            f".env file: {self.env_path or 'not found'}",
            f"environment: {self.env_prefix}__<SECTION>__<KEY>",
        ]


class ConfigError(RuntimeError):
    """Configuration could not be read or did not validate."""


def _read_toml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _leaves(mapping: Mapping[str, Any], prefix: str = "") -> Iterator[Tuple[str, Any]]:
    for key, value in mapping.items():
        dotted = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            yield from _leaves(value, dotted)
        else:
            yield dotted, value


def _set_dotted(target: Dict[str, Any], dotted: str, value: Any) -> None:
    *parents, leaf = dotted.split(".")
    for part in parents:
        child = target.get(part)
        if not isinstance(child, dict):
            child = target[part] = {}
        target = child
    target[leaf] = value


def _prefixed(
    variables: Mapping[str, Optional[str]], prefix: str
) -> Iterator[Tuple[str, str, str]]:
    """Yield ``(variable, dotted key, raw value)`` for variables under ``prefix``."""

    marker = prefix + "__"
    for name, raw in variables.items():
        if raw is None or not name.startswith(marker):
            continue
        parts = [part.lower() for part in name[len(marker):].split("__") if part]
        if parts:
            yield name, ".".join(parts), raw


def _validation_error(
    error: ValidationError, provenance: Mapping[str, ConfigValueOrigin]
) -> ConfigError:
    lines = []
    for issue in error.errors():
        key = ".".join(str(part) for part in issue["loc"])
        origin = provenance.get(key)
        where = f" [from {origin.render()}]" if origin else ""
        lines.append(f"{key or '<root>'}: {issue['msg']}{where}")
    return ConfigError("Invalid configuration:\n  " + "\n  ".join(lines))


def load_config(
    path: Optional[Path] = None,
    *,
    env_prefix: str = DEFAULT_ENV_PREFIX,
    environ: Optional[Mapping[str, str]] = None,
) -> Config:
    """Resolve the active configuration.

    ``path`` defaults to ``config.toml`` in the project root; the ``.env`` file
    is looked up beside it. ``environ`` defaults to ``os.environ``. String
    values from the environment are coerced by the schema.
    """

    config_path = Path(path) if path else Path(__file__).resolve().parents[1] / CONFIG_FILENAME
    env_path = config_path.parent / ENV_FILENAME
    if environ is None:
        environ = os.environ

    merged: Dict[str, Any] = {}
    provenance: Dict[str, ConfigValueOrigin] = {}

    defaults = DEFAULT_CONFIG.model_dump(mode="python")
    for data, origin in (
        (defaults, ConfigValueOrigin("defaults", "newsdash.config_schema")),
        (_read_toml(config_path), ConfigValueOrigin("file", str(config_path))),
    ):
        for dotted, value in _leaves(data):
            _set_dotted(merged, dotted, value)
            provenance[dotted] = origin

    env_files = dotenv_values(env_path) if env_path.exists() else {}
    for layer, source, variables in (
        ("env-file", str(env_path), env_files),
        ("env", "process", environ),
    ):
        for name, dotted, raw in _prefixed(variables, env_prefix):
            _set_dotted(merged, dotted, raw)
            provenance[dotted] = ConfigValueOrigin(layer, source, env_var=name)

    try:
        config = Config.model_validate(merged)
    except ValidationError as exc:
        raise _validation_error(exc, provenance) from exc
    config._metadata = ConfigMetadata(
        config_path=config_path,
        env_path=env_path if env_path.exists() else None,
        env_prefix=env_prefix,
        provenance=provenance,
    )
    return config


def explain(config: Config, key: str) -> str:
    """Resolved value of a dotted key and the layer that supplied it."""

    values = dict(_leaves(config.model_dump(mode="json")))
    if key not in values:
        raise ConfigError(f"Unknown configuration key: {key}")
    metadata: Optional[ConfigMetadata] = config._metadata
    origin = metadata.provenance.get(key) if metadata else None
    return f"{key} = {values[key]!r}\nsource: {origin.render() if origin else 'unknown'}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect the news dashboard configuration")
    parser.add_argument("--config", type=Path, help="Path to config.toml")
    parser.add_argument("--env-prefix", default=DEFAULT_ENV_PREFIX)
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("--validate", action="store_true", help="Exit 1 if the configuration is invalid")
    action.add_argument("--show-sources", action="store_true", help="List the layers in precedence order")
    action.add_argument("--explain", metavar="KEY", help="Show a value and where it came from")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, env_prefix=args.env_prefix)
        if args.validate:
            print("Configuration OK")
        elif args.show_sources:
            print("\n".join(config._metadata.describe_sources()))
        else:
            print(explain(config, args.explain))
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
