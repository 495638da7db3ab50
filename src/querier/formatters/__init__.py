"""Output formatters for querier."""

from querier.formatters.base import Formatter, FormatterRegistry, registry
from querier.formatters.csv import CSVFormatter
from querier.formatters.html import HTMLFormatter
from querier.formatters.json import JSONFormatter
from querier.formatters.markdown import MarkdownFormatter
from querier.formatters.plain import PlainFormatter
from querier.formatters.table import TableFormatter
from querier.formatters.xlsx import XLSXFormatter
from querier.formatters.xml import XMLFormatter
from querier.formatters.yaml import YAMLFormatter
