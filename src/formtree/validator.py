"""Recursive tree validation.

``validate()`` walks a form tree and returns a rebuilt copy in which
every node carries translated errors and a final ``valid`` flag. Per
node, in order:

1. the field validator fills in raw errors
2. flagged select fields get an ``"invalid value"`` error appended
3. every raw error is translated
4. nested forms and non-removed collection entries are validated
5. ``valid`` is computed from the node's errors and its children

Removed collection entries are not re-validated: they keep whatever
errors they had and are marked valid.
"""

import logging
from dataclasses import replace
from typing import Protocol, runtime_checkable

from formtree.config import ValidationConfig, get_config
from formtree.errors import ConfigurationError
from formtree.nodes import Collection, CollectionEntry, Field, FormNode, Item, Nested
from formtree.selection import check_selects, merge_errors
from formtree.translation import translate_errors
from formtree.validity import is_valid

logger = logging.getLogger("formtree.validator")


@runtime_checkable
class FieldValidator(Protocol):
    """A pluggable field-level validation strategy.

    ``validate`` returns *node* with ``errors`` holding the raw
    ``(template, options)`` entries for the node's own fields. It must
    not change ``items``.
    """

    def validate(self, node: FormNode) -> FormNode: ...


def resolve_validator(node: FormNode, config: ValidationConfig) -> FieldValidator:
    """Return the field validator that applies to *node*.

    Raises:
        ConfigurationError: If neither the node nor *config* names one.
    """
    validator = node.validator or config.validator
    if validator is None:
        msg = (
            f"No field validator for form {node.name!r}. "
            "Set one with formtree.configure(validator=...) or on the node."
        )
        raise ConfigurationError(msg)
    return validator


def validate(node: FormNode, config: ValidationConfig | None = None) -> FormNode:
    """Validate *node* and everything below it.

    Args:
        node: Root of the tree to validate. Left untouched.
        config: Defaults for nodes without their own validator or
            translator. When omitted, the process-wide configuration is
            read once here and used for the whole tree.

    Returns:
        A new tree with translated ``errors`` and ``valid`` set on every
        validated node.

    Raises:
        ConfigurationError: If some node has no validator to run.
    """
    return _validate_node(node, config if config is not None else get_config())


def _validate_node(node: FormNode, config: ValidationConfig) -> FormNode:
    logger.debug("Validating form %r", node.name)

    validator = resolve_validator(node, config)
    checked = validator.validate(node)
    node = replace(node, errors=merge_errors(checked.errors, check_selects(node)))
    node = replace(node, errors=translate_errors(node, config))

    items = tuple(_validate_item(item, config) for item in node.items)
    node = replace(node, items=items)

    valid = is_valid(node)
    if not valid:
        logger.debug("Form %r is invalid", node.name)
    return replace(node, valid=valid)


def _validate_item(item: Item, config: ValidationConfig) -> Item:
    match item:
        case Nested():
            return replace(item, form=_validate_node(item.form, config))
        case Collection():
            entries = tuple(_validate_entry(item, entry, config) for entry in item.entries)
            return replace(item, entries=entries)
        case Field():
            return item
        case _:
            msg = (
                f"Cannot validate item of type {type(item).__name__}. "
                "Form items must be Field, Nested, or Collection; "
                "wrap sub-forms in Nested."
            )
            raise TypeError(msg)


def _validate_entry(
    collection: Collection, entry: CollectionEntry, config: ValidationConfig
) -> CollectionEntry:
    if collection.to_be_removed(entry):
        logger.debug("Skipping removed entry of collection %r", collection.name)
        return replace(entry, form=replace(entry.form, valid=True))
    return replace(entry, form=_validate_node(entry.form, config))
