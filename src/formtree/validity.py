"""Node validity — own errors plus already-validated children."""

from formtree.nodes import ErrorMap, FormNode


def no_field_errors(errors: ErrorMap) -> bool:
    """False as soon as any field has at least one error.

    A field listed with an empty list counts as clean.
    """
    return not any(field_errors for field_errors in errors.values())


def nested_valid(node: FormNode) -> bool:
    return all(item.form.valid for item in node.nested())


def collections_valid(node: FormNode) -> bool:
    # Removed entries were forced valid before this runs
    return all(
        entry.form.valid for collection in node.collections() for entry in collection.entries
    )


def is_valid(node: FormNode) -> bool:
    """Compute *node*'s validity once its errors and children are final.

    A node with no errors and no children is always valid.
    """
    return no_field_errors(node.errors) and nested_valid(node) and collections_valid(node)
