"""Generation run integration tests against the sample configuration schema."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import yaml
from form_schema_generator.generation_run import (
    GenerationError,
    GenerationRequest,
    execute_generation_run,
    list_category_types,
)
from form_schema_generator.schema_transforms import STANDARD_FORMATS


def _sample_schema_path() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "sample-config-schema.json"


def _write_config(tmp_path: Path, **extra: Any) -> Path:
    config: dict[str, Any] = {
        "schema_path": str(_sample_schema_path()),
        "output_dir": "forms",
        "categories": {
            "policies": {
                "name": "Policies",
                "description": "Security, traffic management, and transformation rules",
                "item_type": "LocalPolicy",
                "type_patterns": ["Policy"],
                "exclude": ["FilterOrPolicy"],
            },
            "routes": {
                "name": "Routes",
                "description": "HTTP and TCP routing configurations",
                "type_patterns": ["Route"],
            },
            "backends": {
                "name": "Backends",
                "description": "Backend service connections",
                "item_type": "FullLocalBackend",
                "type_patterns": ["Backend"],
            },
        },
        "field_descriptions": {"port": "Network port number"},
    }
    config.update(extra)
    path = tmp_path / "form-generation.yaml"
    path.write_text(yaml.safe_dump(config, sort_keys=False), encoding="utf-8")
    return path


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _walk(node: Any, in_choice: bool = False) -> Iterator[tuple[dict[str, Any], bool]]:
    if isinstance(node, list):
        for item in node:
            yield from _walk(item)
        return
    if not isinstance(node, dict):
        return
    yield node, in_choice
    for key, value in node.items():
        if key in ("oneOf", "anyOf") and isinstance(value, list):
            for member in value:
                yield from _walk(member, True)
        elif key in ("properties", "$defs") and isinstance(value, dict):
            for child in value.values():
                yield from _walk(child)
        else:
            yield from _walk(value)


def test_generates_one_schema_per_type_and_an_index(tmp_path: Path) -> None:
    outcome = execute_generation_run(GenerationRequest(config_path=str(_write_config(tmp_path))))

    assert outcome.output_dir == (tmp_path / "forms").resolve()
    written = {category.key: category.written for category in outcome.categories}
    assert written == {
        "policies": ("LocalPolicy", "LocalRateLimitPolicy", "JWTPolicy"),
        "routes": ("LocalRoute", "TCPRoute", "RouteMatch", "RouteBackend"),
        "backends": ("FullLocalBackend", "RouteBackend"),
    }

    routes_dir = outcome.output_dir / "routes"
    assert sorted(path.name for path in routes_dir.iterdir()) == [
        "LocalRoute.json",
        "RouteBackend.json",
        "RouteMatch.json",
        "TCPRoute.json",
        "index.json",
    ]
    index = _read_json(routes_dir / "index.json")
    assert index["category"] == "Routes"
    assert index["description"] == "HTTP and TCP routing configurations"
    assert index["types"][1] == {
        "key": "TCPRoute",
        "displayName": "TCP Route",
        "description": "TCP Route with matching conditions",
        "schemaFile": "TCPRoute.json",
    }
    assert index["types"][3]["description"] == (
        "Route Backend connection with matching conditions"
    )


def test_schema_title_and_description_come_from_discovery(tmp_path: Path) -> None:
    outcome = execute_generation_run(GenerationRequest(config_path=str(_write_config(tmp_path))))

    policy = _read_json(outcome.output_dir / "policies" / "LocalPolicy.json")
    assert policy["title"] == "Local Policy"
    assert policy["description"] == "A policy attached to a route or backend"
    assert policy["$schema"] == "https://json-schema.org/draft/2020-12/schema"
    assert list(policy["$defs"]) == ["FilterOrPolicy", "LocalRateLimitPolicy"]

    jwt = _read_json(outcome.output_dir / "policies" / "JWTPolicy.json")
    assert jwt["title"] == "JWT Policy"
    assert jwt["description"] == "JWT Policy configuration"
    assert "$defs" not in jwt
    assert jwt["properties"]["jwksUrl"]["format"] == "uri"
    assert [choice["const"] for choice in jwt["properties"]["mode"]["oneOf"]] == [
        "strict",
        "optional",
        "permissive",
    ]


def test_route_match_choices_are_normalized_and_sanitized(tmp_path: Path) -> None:
    outcome = execute_generation_run(GenerationRequest(config_path=str(_write_config(tmp_path))))

    route_match = _read_json(outcome.output_dir / "routes" / "RouteMatch.json")
    path_choices = route_match["properties"]["path"]["oneOf"]
    assert [choice["title"] for choice in path_choices] == ["Exact", "Path Prefix"]
    assert all("additionalProperties" not in choice for choice in path_choices)
    assert route_match["properties"]["method"]["oneOf"] == [
        {"const": "GET", "title": "GET"},
        {"const": "POST", "title": "POST"},
        {"type": "null", "title": "(none)"},
    ]


def test_every_output_is_closed_under_references_and_free_of_leaks(tmp_path: Path) -> None:
    outcome = execute_generation_run(GenerationRequest(config_path=str(_write_config(tmp_path))))

    schema_files = [
        path for path in outcome.output_dir.rglob("*.json") if path.name != "index.json"
    ]
    assert len(schema_files) == 9
    for path in schema_files:
        document = _read_json(path)
        definitions = document.get("$defs", {})
        for node, in_choice in _walk(document):
            reference = node.get("$ref")
            if isinstance(reference, str):
                assert reference.removeprefix("#/$defs/") in definitions, path.name
            assert "unevaluatedProperties" not in node, path.name
            if "format" in node:
                assert node["format"] in STANDARD_FORMATS, path.name
            if in_choice:
                assert node.get("additionalProperties") is not False, path.name


def test_root_closed_properties_flag_is_preserved(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        categories={"listeners": {"name": "Listeners", "item_type": "LocalBind"}},
    )

    outcome = execute_generation_run(GenerationRequest(config_path=str(config_path)))

    bind = _read_json(outcome.output_dir / "listeners" / "LocalBind.json")
    assert bind["additionalProperties"] is False
    assert bind["properties"]["port"] == {
        "type": "integer",
        "minimum": 0,
        "maximum": 65535,
        "title": "Port",
        "description": "Network port number",
    }
    assert "unevaluatedProperties" not in bind["$defs"]["LocalListener"]


def test_type_overrides_are_written_verbatim(tmp_path: Path) -> None:
    override = {"type": "object", "properties": {"host": {"type": "string"}}}
    config_path = _write_config(tmp_path, type_overrides={"FullLocalBackend": override})

    outcome = execute_generation_run(GenerationRequest(config_path=str(config_path)))

    backend = _read_json(outcome.output_dir / "backends" / "FullLocalBackend.json")
    assert backend["properties"] == {"host": {"type": "string"}}
    assert backend["title"] == "Full Local Backend"
    route_backend = _read_json(outcome.output_dir / "backends" / "RouteBackend.json")
    assert route_backend["$defs"]["FullLocalBackend"] == override


def test_rerun_removes_outputs_of_types_no_longer_discovered(tmp_path: Path) -> None:
    execute_generation_run(GenerationRequest(config_path=str(_write_config(tmp_path))))
    routes_dir = tmp_path / "forms" / "routes"
    (routes_dir / "notes.txt").write_text("kept", encoding="utf-8")

    narrowed = _write_config(
        tmp_path,
        categories={"routes": {"name": "Routes", "item_type": "TCPRoute"}},
    )
    outcome = execute_generation_run(GenerationRequest(config_path=str(narrowed)))

    (routes,) = outcome.categories
    assert routes.written == ("TCPRoute",)
    assert sorted(path.name for path in routes.removed) == [
        "LocalRoute.json",
        "RouteBackend.json",
        "RouteMatch.json",
    ]
    assert sorted(path.name for path in routes_dir.iterdir()) == [
        "TCPRoute.json",
        "index.json",
        "notes.txt",
    ]


def test_request_paths_override_configuration(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, schema_path="missing.json")
    output_dir = tmp_path / "elsewhere"

    outcome = execute_generation_run(
        GenerationRequest(
            config_path=str(config_path),
            schema_path=str(_sample_schema_path()),
            output_dir=str(output_dir),
        )
    )

    assert outcome.output_dir == output_dir
    assert (output_dir / "policies" / "index.json").exists()


def test_missing_base_schema_is_fatal(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, schema_path="missing.json")

    with pytest.raises(GenerationError, match="Failed to read base schema"):
        execute_generation_run(GenerationRequest(config_path=str(config_path)))


def test_invalid_configuration_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(GenerationError, match="Configuration file not found"):
        execute_generation_run(GenerationRequest(config_path=str(tmp_path / "nope.yaml")))


def test_list_category_types_writes_nothing(tmp_path: Path) -> None:
    listings = list_category_types(GenerationRequest(config_path=str(_write_config(tmp_path))))

    assert [listing.category.key for listing in listings] == ["policies", "routes", "backends"]
    assert [entry.key for entry in listings[2].types] == ["FullLocalBackend", "RouteBackend"]
    assert not (tmp_path / "forms").exists()


def test_unsafe_type_keys_stay_inside_the_category_directory(tmp_path: Path) -> None:
    schema_path = tmp_path / "schema.json"
    schema_path.write_text(
        json.dumps(
            {
                "$defs": {
                    "index": {"type": "object"},
                    "a/Route": {"type": "object"},
                    "../../EscRoute": {"type": "object"},
                    "Route": {"type": "object"},
                }
            }
        ),
        encoding="utf-8",
    )
    routes = {"routes": {"name": "Routes", "item_type": "index", "type_patterns": ["Route"]}}
    config_path = _write_config(tmp_path, schema_path=str(schema_path), categories=routes)

    outcome = execute_generation_run(GenerationRequest(config_path=str(config_path)))

    (category,) = outcome.categories
    assert category.written == ("a/Route", "../../EscRoute", "Route")
    assert category.skipped == ("index",)
    routes_dir = tmp_path / "forms" / "routes"
    assert sorted(path.name for path in routes_dir.iterdir()) == [
        "..%2F..%2FEscRoute.json",
        "Route.json",
        "a%2FRoute.json",
        "index.json",
    ]
    assert [path for path in tmp_path.rglob("*.json") if path.parent != routes_dir] == [
        schema_path
    ]
    index = _read_json(routes_dir / "index.json")
    assert index["category"] == "Routes"
    assert [entry["schemaFile"] for entry in index["types"]] == [
        "a%2FRoute.json",
        "..%2F..%2FEscRoute.json",
        "Route.json",
    ]

    narrowed = {"routes": {"name": "Routes", "item_type": "Route"}}
    execute_generation_run(
        GenerationRequest(
            config_path=str(
                _write_config(tmp_path, schema_path=str(schema_path), categories=narrowed)
            )
        )
    )

    assert sorted(path.name for path in routes_dir.iterdir()) == ["Route.json", "index.json"]
