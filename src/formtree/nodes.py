"""Form tree data model — fields, nested forms, and collections.

Frozen dataclasses built by the form-definition layer. Validation never
mutates them in place: ``formtree.validate()`` returns a rebuilt tree via
``dataclasses.replace``.

A tree looks like::

    FormNode("user", items=(
        Field("name", FieldType.TEXT, value="alice"),
        Nested("address", FormNode("address", items=(...))),
        Collection("phones", entries=(
            CollectionEntry(FormNode("phone", items=(...))),
            CollectionEntry(FormNode("phone", items=(...)), removed=True),
        )),
    ))
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from formtree.validator import FieldValidator

# A raw, untranslated error: (message template, interpolation options)
type RawError = tuple[str, Mapping[str, Any] | Sequence[tuple[str, Any]]]

# An error as stored on a node: raw before translation, a string after
type ErrorEntry = RawError | str

type ErrorMap = dict[str, list[ErrorEntry]]

type TranslateError = Callable[[RawError], str]


class FieldType(StrEnum):
    """Type tag of a ``Field``.

    Only the selection kinds carry meaning for the core; any other tag
    is treated alike.
    """

    TEXT = "text"
    TEXTAREA = "textarea"
    CHECKBOX = "checkbox"
    SELECT = "select"
    MULTIPLE_SELECT = "multiple_select"
    HIDDEN = "hidden"


SELECT_TYPES = frozenset({FieldType.SELECT, FieldType.MULTIPLE_SELECT})


@dataclass(frozen=True, slots=True)
class Field:
    """A leaf input.

    ``data`` is a free-form bag filled by the binding layer. The
    ``invalid_select`` key marks a submitted selection that matched
    no allowed option.

    ``validation`` holds rules for ``formtree.rules.RuleValidator``;
    other validators are free to ignore it.
    """

    name: str
    type: str = FieldType.TEXT
    value: Any = None
    data: Mapping[str, Any] = field(default_factory=dict)
    validation: tuple[Callable[[Any], RawError | None], ...] = ()

    @property
    def invalid_select(self) -> bool:
        return bool(self.data.get("invalid_select"))


@dataclass(frozen=True, slots=True)
class Nested:
    """An embedded sub-form."""

    name: str
    form: FormNode


@dataclass(frozen=True, slots=True)
class CollectionEntry:
    """One repeated sub-form plus its removal flag.

    ``removed`` comes from the binding layer (e.g. a ticked "delete
    this row" checkbox). Removed entries are kept so they still render.
    """

    form: FormNode
    removed: bool = False


@dataclass(frozen=True, slots=True)
class Collection:
    """Zero or more repeated sub-forms, in order."""

    name: str
    entries: tuple[CollectionEntry, ...] = ()

    def to_be_removed(self, entry: CollectionEntry) -> bool:
        """True when *entry* is marked for removal."""
        return entry.removed


type Item = Field | Nested | Collection


@dataclass(frozen=True, slots=True)
class FormNode:
    """One form or sub-form in the tree.

    ``errors`` maps field names to error lists: raw ``(template,
    options)`` entries as produced by a validator, translated strings
    once ``validate()`` has run.

    ``valid`` is ``None`` until the node has been validated.

    ``validator`` and ``translate_error`` override the process-wide
    defaults from ``formtree.config`` for this node only.
    """

    name: str = "form"
    items: tuple[Item, ...] = ()
    errors: ErrorMap = field(default_factory=dict)
    valid: bool | None = None
    validator: FieldValidator | None = None
    translate_error: TranslateError | None = None

    def fields(self) -> Iterator[Field]:
        """Yield this node's own ``Field`` items."""
        return (item for item in self.items if isinstance(item, Field))

    def nested(self) -> Iterator[Nested]:
        """Yield this node's ``Nested`` items."""
        return (item for item in self.items if isinstance(item, Nested))

    def collections(self) -> Iterator[Collection]:
        """Yield this node's ``Collection`` items."""
        return (item for item in self.items if isinstance(item, Collection))

    def get_field(self, name: str) -> Field | None:
        """Return the field called *name*, or ``None``."""
        for item in self.fields():
            if item.name == name:
                return item
        return None

    def errors_for(self, name: str) -> list[ErrorEntry]:
        """Return the errors for field *name* (empty when it has none)."""
        return list(self.errors.get(name, []))
