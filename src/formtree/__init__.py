"""Formtree — recursive validation for nested forms and collections.

Validates a tree of forms, sub-forms, and repeated sub-forms with a
pluggable field validator. Every node comes back with translated errors
and a ``valid`` flag that is only true when the node and all of its
non-removed descendants are clean.

Usage::

    from formtree import (
        Collection, CollectionEntry, Field, FormNode, Nested,
        RuleValidator, configure, max_length, required,
        template_translator, validate,
    )

    configure(validator=RuleValidator(), translate_error=template_translator())

    form = FormNode("user", items=(
        Field("name", value="", validation=(required, max_length(50))),
        Nested("address", FormNode("address", items=(
            Field("city", value="Lyon", validation=(required,)),
        ))),
        Collection("phones", entries=(
            CollectionEntry(FormNode("phone", items=(
                Field("number", value="", validation=(required,)),
            )), removed=True),
        )),
    ))

    result = validate(form)
    result.valid             # False
    result.errors["name"]    # ["This field is required"]
"""

from formtree.config import ValidationConfig, configure, get_config, reset_config
from formtree.errors import ConfigurationError, FormtreeError
from formtree.nodes import (
    Collection,
    CollectionEntry,
    Field,
    FieldType,
    FormNode,
    Item,
    Nested,
    RawError,
)
from formtree.rules import (
    Rule,
    RuleValidator,
    email,
    integer,
    matches,
    max_length,
    min_length,
    number,
    one_of,
    required,
    url,
)
from formtree.selection import check_selects, merge_errors
from formtree.translation import identity, template_translator, translate_errors
from formtree.validator import FieldValidator, validate
from formtree.validity import is_valid

__version__ = "0.1.0"
__all__ = [
    "Collection",
    "CollectionEntry",
    "ConfigurationError",
    "Field",
    "FieldType",
    "FieldValidator",
    "FormNode",
    "FormtreeError",
    "Item",
    "Nested",
    "RawError",
    "Rule",
    "RuleValidator",
    "ValidationConfig",
    "check_selects",
    "configure",
    "email",
    "get_config",
    "identity",
    "integer",
    "is_valid",
    "matches",
    "max_length",
    "merge_errors",
    "min_length",
    "number",
    "one_of",
    "required",
    "reset_config",
    "template_translator",
    "translate_errors",
    "url",
    "validate",
]
