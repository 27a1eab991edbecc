"""Field rules and operation descriptors.

An ``Operation`` is plain data: where the request goes, which fields it
starts with, what each field may hold, and one validation function that
runs before any payload leaves the pipeline. The ``Content`` pipeline is
the only code that interprets it.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from logistics.enums import LogisticsSubType, LogisticsType
from logistics.errors import FieldTooLong, InvalidValue, RequiredFieldMissing

FieldMap = dict[str, Any]


@dataclass(frozen=True)
class FieldRule:
    """Constraints checked when a field is configured (fail-fast)."""

    max_length: int | None = None
    non_negative: bool = False
    choices: frozenset | None = None
    choices_reason: str = "Value is not allowed"
    render: Callable[[Any], Any] | None = None

    def apply(self, name: str, value: Any) -> Any:
        """Return the value to store, or raise if it breaks a constraint."""
        if self.render is not None:
            value = self.render(value)

        if self.max_length is not None and len(str(value)) > self.max_length:
            raise FieldTooLong(name, self.max_length)

        if self.non_negative:
            if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
                raise InvalidValue(name, "Amount must be a number")
            if value < 0:
                raise InvalidValue(name, "Amount cannot be negative")

        if self.choices is not None and value not in self.choices:
            raise InvalidValue(name, self.choices_reason)

        return value


@dataclass(frozen=True)
class Operation:
    """A request kind described as data.

    ``request_path`` is either a fixed path or a function of the current
    fields. ``on_change`` maps a field name to a hook that updates linked
    fields after that field is configured.
    """

    name: str
    request_path: str | Callable[[Mapping[str, Any]], str]
    validate: Callable[[Mapping[str, Any]], None]
    rules: Mapping[str, FieldRule] = field(default_factory=dict)
    defaults: Callable[[], FieldMap] = dict
    on_change: Mapping[str, Callable[[FieldMap], None]] = field(default_factory=dict)

    def path_for(self, fields: Mapping[str, Any]) -> str:
        if callable(self.request_path):
            return self.request_path(fields)
        return self.request_path


# ---------------------------------------------------------------------------
# Requirement helpers used by operation validators
# ---------------------------------------------------------------------------
def is_missing(value: Any) -> bool:
    """Absent, None or empty string. Numeric zero counts as present."""
    return value is None or value == ""


def require(fields: Mapping[str, Any], *names: str) -> None:
    for name in names:
        if is_missing(fields.get(name)):
            raise RequiredFieldMissing(name)


def require_any(fields: Mapping[str, Any], *names: str, label: str | None = None) -> None:
    """At least one of ``names`` must be present."""
    if all(is_missing(fields.get(name)) for name in names):
        raise RequiredFieldMissing(label or " or ".join(names))


# ---------------------------------------------------------------------------
# Shared rules and hooks
# ---------------------------------------------------------------------------
def amount_rule() -> FieldRule:
    return FieldRule(non_negative=True)


def sub_type_rule(predicate=None, reason: str = "Value is not allowed") -> FieldRule:
    return FieldRule(choices=LogisticsSubType.values(predicate), choices_reason=reason)


def join_values(value: Any) -> Any:
    """Field renderer: lists and tuples become a comma-joined string."""
    if isinstance(value, list | tuple):
        return ",".join(str(item) for item in value)
    return value


def sync_logistics_type(fields: FieldMap) -> None:
    """Keep LogisticsType consistent with the chosen LogisticsSubType."""
    sub_type = fields.get("LogisticsSubType")
    if sub_type in LogisticsSubType.values(lambda member: member.is_home):
        fields["LogisticsType"] = LogisticsType.HOME.value
    else:
        fields["LogisticsType"] = LogisticsType.CVS.value
