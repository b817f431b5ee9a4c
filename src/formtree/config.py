"""Validation configuration.

ValidationConfig is a frozen dataclass, immutable after creation. A
process-wide default is held here and read once per top-level
``validate()`` call::

    from formtree import RuleValidator, configure, template_translator

    configure(validator=RuleValidator(), translate_error=template_translator())

Passing a config explicitly skips the process-wide default::

    validate(form, ValidationConfig(validator=MyValidator()))

Changing the default while a ``validate()`` call is running affects only
later calls; the running call keeps the value it resolved on entry.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from formtree.nodes import TranslateError
    from formtree.validator import FieldValidator


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Default validator and translation function. Immutable after creation.

    Either may be ``None``. Nodes can override both via their own
    ``validator`` / ``translate_error`` attributes.
    """

    validator: FieldValidator | None = None
    translate_error: TranslateError | None = None


_default = ValidationConfig()


def get_config() -> ValidationConfig:
    """Return the current process-wide configuration."""
    return _default


def configure(**changes: Any) -> ValidationConfig:
    """Update the process-wide configuration and return it.

    Accepts the ``ValidationConfig`` field names as keywords. Unknown
    names raise ``TypeError``.
    """
    global _default
    _default = replace(_default, **changes)
    return _default


def reset_config() -> None:
    """Restore the empty process-wide configuration."""
    global _default
    _default = ValidationConfig()
