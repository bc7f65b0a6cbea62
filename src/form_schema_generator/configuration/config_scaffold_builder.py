"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "form-generation.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Form schema generator configuration.
# Relative paths are resolved against the directory holding this file.

# Generated JSON Schema of the configuration model (must contain $defs).
schema_path: "../schema/config.json"

# One sub-directory per category is written here.
output_dir: "schema-forms"

# Categories, in the order they are generated.
#   item_type:     primary definition for the category, listed first (optional)
#   type_patterns: definitions whose name contains any of these are included
#   exclude:       definition names never included through a pattern
categories:
  policies:
    name: "Policies"
    description: "Security, traffic management, and transformation rules"
    item_type: "LocalPolicy"
    type_patterns: ["Policy", "Policies"]
    exclude: ["FilterOrPolicy"]
  listeners:
    name: "Listeners"
    description: "Port bindings and protocol listeners"
    item_type: "LocalBind"
    type_patterns: ["Listener", "Bind"]
    exclude: []
  routes:
    name: "Routes"
    description: "HTTP and TCP routing configurations"
    type_patterns: ["Route"]
    exclude: []
  backends:
    name: "Backends"
    description: "Backend service connections"
    item_type: "FullLocalBackend"
    type_patterns: ["Backend"]
    exclude: []

# Replacement fragments used verbatim instead of a definition (optional).
type_overrides: {}

# Descriptions for well-known property names that lack one (optional).
field_descriptions:
  name: "Unique name used to reference this item"
  hostname: "Host name to match or connect to"
  port: "Network port number"
  address: "Network address in host:port form"
  timeout: "Maximum time to wait, as a duration such as 10s"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration with the default categories and guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the starter generator configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
