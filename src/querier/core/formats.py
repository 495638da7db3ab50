"""Output format identifiers."""

from enum import StrEnum


class OutputFormat(StrEnum):
    TABLE = "table"
    MARKDOWN = "markdown"
    HTML = "html"
    CSV = "csv"
    JSON = "json"
    YAML = "yaml"
    XML = "xml"
    XLSX = "xlsx"
    PLAIN = "plain"
