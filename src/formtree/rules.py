"""Rule-list field validator and built-in rules.

Each rule is a callable with the signature::

    def rule(value) -> RawError | None:
        '''Return a (template, options) error, or None if valid.'''

Parameterized rules are factory functions that return a rule::

    def max_length(n: int) -> Rule:
        def check(value) -> RawError | None:
            if len(value) > n:
                return ("Must be at most {{ count }} characters", {"count": n})
            return None
        return check

Attach rules to fields and let ``RuleValidator`` run them::

    Field("title", validation=(required, max_length(200)))

Templates use kida syntax, so ``template_translator()`` renders the
options into the message. The identity translator shows the raw
template instead.
"""

import re
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from formtree.nodes import ErrorMap, FormNode, RawError

# Type alias for a rule function
type Rule = Callable[[Any], RawError | None]


class RuleValidator:
    """Field validator that runs each field's ``validation`` rules.

    Rules run in order on the field value (``None`` becomes ``""``).
    A failing ``required`` stops the remaining rules for that field:
    no point running ``max_length`` on an empty string.

    The returned node's ``errors`` holds only the errors found in this
    run; fields that pass get no entry.
    """

    __slots__ = ()

    def validate(self, node: FormNode) -> FormNode:
        errors: ErrorMap = {}
        for item in node.fields():
            value = "" if item.value is None else item.value
            field_errors: list[RawError] = []
            for rule in item.validation:
                error = rule(value)
                if error is not None:
                    field_errors.append(error)
                    if rule is required:
                        break
            if field_errors:
                errors[item.name] = field_errors
        return replace(node, errors=errors)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(value: Any) -> RawError | None:
    """Field must be present and non-empty.

    Lists (multi-selects, checkbox groups) must hold at least one value.
    Non-string scalars such as ``0`` or ``False`` count as present.
    """
    if value is None:
        return ("This field is required", {})
    if isinstance(value, (list, tuple)):
        if not value:
            return ("This field is required", {})
        return None
    if isinstance(value, str) and not value.strip():
        return ("This field is required", {})
    return None


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def _length(value: Any) -> int:
    """Item count for lists, character count of ``str(value)`` otherwise."""
    if isinstance(value, (list, tuple)):
        return len(value)
    return len(str(value))


def max_length(n: int) -> Rule:
    """Value must be at most *n* characters (or *n* items, for lists)."""

    def check(value: Any) -> RawError | None:
        if _length(value) > n:
            return ("Must be at most {{ count }} characters", {"count": n})
        return None

    return check


def min_length(n: int) -> Rule:
    """Value must be at least *n* characters (or *n* items, for lists)."""

    def check(value: Any) -> RawError | None:
        if _length(value) < n:
            return ("Must be at least {{ count }} characters", {"count": n})
        return None

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Basic email pattern — checks structure, not deliverability
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")


def email(value: Any) -> RawError | None:
    """Value must be a valid email address (basic format check)."""
    if not _EMAIL_RE.match(str(value)):
        return ("Must be a valid email address", {})
    return None


# Basic URL pattern — checks scheme + host structure
_URL_RE = re.compile(r"^https?://[^\s/$.?#].\S*$", re.IGNORECASE)


def url(value: Any) -> RawError | None:
    """Value must be a valid URL (http/https)."""
    if not _URL_RE.match(str(value)):
        return ("Must be a valid URL", {})
    return None


def matches(pattern: str, message: str | None = None) -> Rule:
    """Value must match the given regex pattern."""
    compiled = re.compile(pattern)

    def check(value: Any) -> RawError | None:
        if not compiled.match(str(value)):
            if message:
                return (message, {"pattern": pattern})
            return ("Must match pattern: {{ pattern }}", {"pattern": pattern})
        return None

    return check


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: str) -> Rule:
    """Value (or every value, for lists) must be one of the given choices."""
    allowed = frozenset(choices)
    options = ", ".join(sorted(allowed))

    def check(value: Any) -> RawError | None:
        values = value if isinstance(value, (list, tuple)) else [value]
        if any(v not in allowed for v in values):
            return ("Must be one of: {{ choices }}", {"choices": options})
        return None

    return check


# ---------------------------------------------------------------------------
# Type coercion
# ---------------------------------------------------------------------------


def integer(value: Any) -> RawError | None:
    """Value must be a valid integer."""
    try:
        int(value)
    except (ValueError, TypeError):
        return ("Must be a whole number", {})
    return None


def number(value: Any) -> RawError | None:
    """Value must be a valid number (int or float)."""
    try:
        float(value)
    except (ValueError, TypeError):
        return ("Must be a number", {})
    return None
