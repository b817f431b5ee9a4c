"""Selection consistency check.

A select widget can receive a value that matches none of its options
(stale client state, tampering). The allowed options live in the
rendering layer, so no field rule can see them; the binding layer marks
such fields with ``data["invalid_select"]`` and this check turns the
flag into an error on every validation pass, whatever validator is
active.
"""

from formtree.nodes import SELECT_TYPES, ErrorEntry, ErrorMap, FormNode

INVALID_SELECT_MESSAGE = "invalid value"


def check_selects(node: FormNode) -> ErrorMap:
    """Return one ``"invalid value"`` error per flagged select field.

    Only the node's own fields are checked, never descendants.
    """
    errors: ErrorMap = {}
    for item in node.fields():
        if item.type in SELECT_TYPES and item.invalid_select:
            errors[item.name] = [(INVALID_SELECT_MESSAGE, [])]
    return errors


def merge_errors(existing: ErrorMap, new: ErrorMap) -> ErrorMap:
    """Merge two error maps, concatenating lists per field.

    Entries from *existing* come first. Field order follows *existing*,
    then names only present in *new*.
    """
    merged: dict[str, list[ErrorEntry]] = {name: list(errs) for name, errs in existing.items()}
    for name, errs in new.items():
        merged.setdefault(name, []).extend(errs)
    return merged
