"""Mimetypes understood by the built-in converters."""

CSV = "text/csv"
JSON = "application/json"
YAML = "application/x-yaml"
NUMPY = "application/x-numpy"
PLAIN = "text/plain"
