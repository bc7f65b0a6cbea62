"""Reference closure tests."""

from __future__ import annotations

from form_schema_generator.schema_transforms.reference_closure import (
    collect_referenced_definitions,
    definition_name,
)


def test_collects_transitive_references_in_discovery_order() -> None:
    definitions = {
        "A": {"properties": {"b": {"$ref": "#/$defs/B"}}},
        "B": {"type": "array", "prefixItems": [{"$ref": "#/$defs/C"}, {"type": "string"}]},
        "C": {"type": "string"},
        "D": {"type": "integer"},
    }

    assert collect_referenced_definitions(definitions["A"], definitions) == ("B", "C")


def test_mutual_references_terminate_and_include_cycle_members() -> None:
    definitions = {
        "A": {"properties": {"next": {"$ref": "#/$defs/B"}}},
        "B": {"anyOf": [{"$ref": "#/$defs/A"}, {"type": "null"}]},
    }

    assert collect_referenced_definitions(definitions["A"], definitions) == ("B", "A")


def test_self_reference_is_collected_once() -> None:
    definitions = {"Node": {"properties": {"children": {"items": {"$ref": "#/$defs/Node"}}}}}

    assert collect_referenced_definitions(definitions["Node"], definitions) == ("Node",)


def test_fragment_without_references_has_empty_closure() -> None:
    assert collect_referenced_definitions({"type": "object"}, {"Other": {}}) == ()


def test_dangling_and_foreign_references_are_ignored() -> None:
    fragment = {
        "oneOf": [
            {"$ref": "#/$defs/Missing"},
            {"$ref": "https://example.com/schema.json"},
            {"$ref": "#/$defs/Known"},
        ]
    }

    assert collect_referenced_definitions(fragment, {"Known": {}}) == ("Known",)


def test_definition_name_parses_local_pointers() -> None:
    assert definition_name("#/$defs/LocalBind") == "LocalBind"
    assert definition_name("#/$defs/a~1b~0c") == "a/b~c"
    assert definition_name("#/$defs/Route/properties/name") == "Route"
    assert definition_name("#/definitions/Route") is None
    assert definition_name("#/$defs/") is None
    assert definition_name(42) is None
