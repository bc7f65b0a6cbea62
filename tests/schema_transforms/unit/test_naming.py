"""Title formatting and description synthesis tests."""

from __future__ import annotations

import pytest
from form_schema_generator.schema_transforms.naming import format_title, synthesize_description


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("TCPRoute", "TCP Route"),
        ("httpsProxy", "Https Proxy"),
        ("LocalLLMPolicy", "Local LLM Policy"),
        ("HTTPSProxy", "HTTPS Proxy"),
        ("HTTP", "HTTP"),
        ("FullLocalBackend", "Full Local Backend"),
        ("port", "Port"),
        ("", ""),
    ],
)
def test_format_title_splits_words_and_keeps_acronyms(name: str, expected: str) -> None:
    assert format_title(name) == expected


def test_existing_description_is_returned_unchanged() -> None:
    fragment = {"type": "object", "description": "Hand-written text"}

    assert synthesize_description("LocalPolicy", fragment) == "Hand-written text"


def test_empty_description_falls_back_to_name() -> None:
    assert synthesize_description("JWTPolicy", {"description": ""}) == "JWT Policy configuration"


def test_every_matching_suffix_is_applied_in_rule_order() -> None:
    description = synthesize_description("RouteBackendPolicy", {})

    assert description == "Route Backend Policy configuration connection with matching conditions"


def test_listener_suffix_and_plain_names() -> None:
    assert synthesize_description("LocalListener", {}) == "Local Listener for incoming connections"
    assert synthesize_description("ServiceRef", {}) == "Service Ref"


def test_custom_rules_replace_defaults() -> None:
    rules = (("Ref", " pointer"),)

    assert synthesize_description("ServiceRef", {}, rules) == "Service Ref pointer"
    assert synthesize_description("LocalPolicy", {}, rules) == "Local Policy"


def test_non_mapping_fragment_is_tolerated() -> None:
    assert synthesize_description("TCPRoute", True) == "TCP Route with matching conditions"
