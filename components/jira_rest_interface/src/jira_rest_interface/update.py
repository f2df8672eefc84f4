"""Partial issue update payloads for ``PUT /rest/api/2/issue/{key}``.

Jira accepts two sections in the body::

    {
        "fields": {"summary": "new summary"},                  # full-value replacement
        "update": {"labels": [{"add": "x"}, {"remove": "y"}]}  # list of operations per field
    }

A payload is either a ``PartialUpdate`` (built from the two sections, at
least one required) or a ``RawPayload`` sent verbatim.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from jira_rest_interface.errors import InvalidArgumentError


@dataclass(frozen=True)
class PartialUpdate:
    fields: Mapping[str, Any] | None = None
    update: Mapping[str, list[dict[str, Any]]] | None = None

    def __post_init__(self) -> None:
        if self.fields is None and self.update is None:
            raise InvalidArgumentError("Need at least one of 'fields' or 'update'")

    def to_json(self) -> dict[str, Any]:
        """Return the request body, omitting absent sections entirely."""
        body: dict[str, Any] = {}
        if self.fields is not None:
            body["fields"] = dict(self.fields)
        if self.update is not None:
            body["update"] = {name: list(ops) for name, ops in self.update.items()}
        return body


@dataclass(frozen=True)
class RawPayload:
    """A caller-assembled ``{"fields": ..., "update": ...}`` body, sent as-is."""

    body: Mapping[str, Any]

    def to_json(self) -> dict[str, Any]:
        return dict(self.body)


UpdatePayload = Union[PartialUpdate, RawPayload]


@dataclass
class IssueUpdateBuilder:
    """Collects field replacements and edit operations, then builds a PartialUpdate.

    Example:
        >>> IssueUpdateBuilder().set_field("summary", "New").add_operation("labels", "add", "x").build()
    """

    _fields: dict[str, Any] = field(default_factory=dict)
    _update: dict[str, list[dict[str, Any]]] = field(default_factory=dict)

    def set_field(self, name: str, value: Any) -> IssueUpdateBuilder:
        self._fields[name] = value
        return self

    def clear_field(self, name: str) -> IssueUpdateBuilder:
        """Reset a field to null."""
        return self.set_field(name, None)

    def add_operation(self, name: str, verb: str, value: Any) -> IssueUpdateBuilder:
        """Append ``{verb: value}`` to the operation list of field ``name``.

        verb is one of Jira's update verbs: set, add, remove, edit.
        """
        self._update.setdefault(name, []).append({verb: value})
        return self

    def build(self) -> PartialUpdate:
        return PartialUpdate(
            fields=dict(self._fields) if self._fields else None,
            update={k: list(v) for k, v in self._update.items()} if self._update else None,
        )


def timetracking_update(
    original_estimate_minutes: int | None = None,
    remaining_estimate_minutes: int | None = None,
) -> PartialUpdate:
    """Build ``update.timetracking[0].edit`` with only the estimates supplied.

    Estimates are sent as '<n>m'. With neither estimate the edit object is
    empty, which Jira accepts as a no-op.
    """
    edit: dict[str, str] = {}
    if original_estimate_minutes is not None:
        edit["originalEstimate"] = f"{original_estimate_minutes}m"
    if remaining_estimate_minutes is not None:
        edit["remainingEstimate"] = f"{remaining_estimate_minutes}m"
    return IssueUpdateBuilder().add_operation("timetracking", "edit", edit).build()


def reset_fields_update(field_names: list[str]) -> PartialUpdate:
    """Build a ``fields`` section setting every named field to null."""
    return PartialUpdate(fields={name: None for name in field_names})
