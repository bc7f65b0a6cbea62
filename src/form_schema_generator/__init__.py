"""Derive standalone, form-renderer-safe JSON Schemas from a generated configuration schema."""
