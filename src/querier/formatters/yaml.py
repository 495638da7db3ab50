"""YAML formatter for ResultSet output."""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml

from querier.core.exceptions import EncodingError
from querier.formatters.base import registry
from querier.formatters.structured import encode_rows

if TYPE_CHECKING:
    from querier.core.models import ResultSet


class YAMLFormatter:
    def render(self, result: ResultSet) -> bytes:
        rows_as_dicts = encode_rows(result)
        try:
            text = yaml.safe_dump(
                rows_as_dicts,
                sort_keys=False,
                allow_unicode=True,
                default_flow_style=False,
            )
        except yaml.YAMLError as e:
            msg = f"YAML encoding failed: {e}"
            raise EncodingError(msg) from e
        return text.encode("utf-8")


registry.register("yaml", YAMLFormatter)
