"""Serialization of table order and hierarchy."""

import json
import re
from typing import Any, Optional
from urllib.parse import urlencode

from tablednd.config import DragConfig
from tablednd.models.table import Table

INVALID_TABLE_ERROR = {
    "error": {
        "code": 500,
        "message": "Not a valid table, no serializable unique id provided.",
    }
}


class RowSequenceSerializer:
    """Rebuilds bucketed ID lists from a flat, indent-annotated row sequence.

    The output maps a bucket key to the IDs of the rows it contains. The
    root bucket is keyed by the table ID (or ``serialize_param_name``); with
    hierarchy enabled every other bucket is keyed by the ID of the row whose
    children it holds.
    """

    def __init__(self, config: DragConfig | None = None):
        """
        Initialize serializer.

        Args:
            config: Drag configuration; the table's own config wins when set
        """
        self.config = config

    def _config_for(self, table: Table) -> DragConfig:
        return table.config or self.config or DragConfig()

    @staticmethod
    def extract_id(row_id: Optional[str], config: DragConfig) -> Optional[str]:
        """
        Trim a raw row ID with the configured pattern.

        Args:
            row_id: Raw row ID
            config: Configuration holding ``serialize_regexp``

        Returns:
            Extracted ID, or None when there is nothing to serialize
        """
        if not row_id:
            return None
        if config.serialize_regexp is None:
            return row_id
        match = re.search(config.serialize_regexp, row_id)
        if match is None or not match.group(0):
            return None
        return match.group(0)

    def table_data(self, table: Optional[Table]) -> dict[str, Any]:
        """
        Build the structured form of a table's order.

        Args:
            table: Table to serialize

        Returns:
            Mapping of bucket key to ordered IDs, or an error payload when the
            table is missing or has no ID
        """
        if table is None or not table.id:
            return {"error": dict(INVALID_TABLE_ERROR["error"])}

        config = self._config_for(table)
        root_key = config.serialize_param_name or table.id
        data: dict[str, list[str]] = {root_key: []}

        if config.hierarchy_enabled:
            self._nested(table, config, root_key, data)
        else:
            self._flat(table, config, root_key, data)
        return data

    def _flat(self, table: Table, config: DragConfig, root_key: str, data: dict) -> None:
        current_key = root_key
        for row in table.rows:
            row_id = self.extract_id(row.id, config)
            if not row_id:
                continue
            data.setdefault(current_key, []).append(row_id)
            if config.chain_flat_buckets:
                current_key = row_id

    def _nested(self, table: Table, config: DragConfig, root_key: str, data: dict) -> None:
        current_key = root_key
        current_level = 0
        # [bucket key, level] pairs saved on the way down; level 0 marks a dead entry
        previous: list[list[Any]] = []

        for index, row in enumerate(table.rows):
            level = row.indent_level
            if level == 0:
                current_key = root_key
                previous = []
            elif level > current_level:
                previous.append([current_key, current_level])
                parent_id = None
                if index > 0:
                    parent_id = self.extract_id(table.rows[index - 1].id, config)
                current_key = parent_id or current_key
            elif level < current_level:
                for entry in previous:
                    if entry[1] == level:
                        current_key = entry[0]
                    if entry[1] >= level:
                        entry[1] = 0
            current_level = level

            row_id = self.extract_id(row.id, config)
            bucket = data.setdefault(current_key, [])
            if row_id:
                bucket.append(row_id)


def to_query_string(data: dict[str, Any]) -> str:
    """
    Render structured data as URL query pairs.

    Lists become ``key[]=value`` pairs and nested mappings ``key[sub]=value``,
    matching what form-encoding front ends send.

    Args:
        data: Structured data from ``table_data``

    Returns:
        URL-encoded query string
    """
    return urlencode(list(_flatten_pairs(data)))


def _flatten_pairs(value: Any, prefix: str = ""):
    if isinstance(value, dict):
        for key, item in value.items():
            yield from _flatten_pairs(item, f"{prefix}[{key}]" if prefix else str(key))
    elif isinstance(value, (list, tuple)):
        for item in value:
            if isinstance(item, (dict, list, tuple)):
                yield from _flatten_pairs(item, f"{prefix}[]")
            else:
                yield f"{prefix}[]", item
    elif value is None:
        yield prefix, ""
    else:
        yield prefix, value


def to_json(data: dict[str, Any], indent: str | int | None = None) -> str:
    """
    Render structured data as JSON text.

    Args:
        data: Structured data from ``table_data``
        indent: Indent string or width; None gives compact output

    Returns:
        JSON text
    """
    if indent is None:
        return json.dumps(data, separators=(",", ":"))
    return json.dumps(data, indent=indent)
