"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import CategoryMapping, GeneratorConfiguration


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GeneratorConfiguration:
    """Load and validate the generator configuration file (YAML or JSON)."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    schema_path = _resolve_path(
        base_path, _require_non_empty_string(parsed.get("schema_path"), "schema_path")
    )
    output_dir = _resolve_path(
        base_path, _require_non_empty_string(parsed.get("output_dir"), "output_dir")
    )

    return GeneratorConfiguration(
        path=path,
        schema_path=schema_path,
        output_dir=output_dir,
        categories=_parse_categories_section(parsed.get("categories")),
        type_overrides=_parse_type_overrides_section(parsed.get("type_overrides")),
        field_descriptions=_parse_field_descriptions_section(parsed.get("field_descriptions")),
    )


def _parse_categories_section(value: Any) -> tuple[CategoryMapping, ...]:
    section = _require_mapping(value, "categories")
    if not section:
        raise ConfigurationError("categories must define at least one category.")
    return tuple(_parse_category(str(key), entry) for key, entry in section.items())


def _parse_category(key: str, value: Any) -> CategoryMapping:
    label = f"categories.{key}"
    section = _require_mapping(value, label)
    name = _require_non_empty_string(section.get("name"), f"{label}.name")
    description = _optional_string(section.get("description"), f"{label}.description") or ""
    item_type = _optional_string(
        _first_present(section, "item_type", "itemType"), f"{label}.item_type"
    )
    type_patterns = _normalize_string_sequence(
        _first_present(section, "type_patterns", "typePatterns"), f"{label}.type_patterns"
    )
    exclude = _normalize_string_sequence(section.get("exclude"), f"{label}.exclude")
    return CategoryMapping(
        key=key,
        name=name,
        description=description,
        item_type=item_type,
        type_patterns=type_patterns,
        exclude=exclude,
    )


def _parse_type_overrides_section(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    section = _require_mapping(value, "type_overrides")
    overrides: dict[str, Any] = {}
    for name, fragment in section.items():
        if not isinstance(fragment, Mapping):
            raise ConfigurationError(f"type_overrides.{name} must be a mapping.")
        overrides[str(name)] = dict(fragment)
    return overrides


def _parse_field_descriptions_section(value: Any) -> dict[str, str]:
    if value is None:
        return {}
    section = _require_mapping(value, "field_descriptions")
    descriptions: dict[str, str] = {}
    for name, description in section.items():
        descriptions[str(name)] = _require_non_empty_string(
            description, f"field_descriptions.{name}"
        )
    return descriptions


def _first_present(section: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in section:
            return section[key]
    return None


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
