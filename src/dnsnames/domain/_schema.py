"""Pydantic integration shared by the text-backed domain types.

Every type validates from ``str`` (or an existing instance in Python mode),
serializes back to ``str`` and advertises a plain string JSON schema.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic_core import core_schema


def text_schema(cls: type[Any], parse: Callable[[str], Any]) -> core_schema.CoreSchema:
    """Build the core schema for a type whose only external form is text."""
    from_text = core_schema.no_info_after_validator_function(
        parse, core_schema.str_schema()
    )
    return core_schema.json_or_python_schema(
        json_schema=from_text,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_text]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(str),
    )
