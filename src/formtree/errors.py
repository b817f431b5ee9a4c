"""Formtree exception hierarchy.

Field errors are plain data on ``FormNode.errors`` and never raised.
Exceptions here cover setup mistakes only.
"""


class FormtreeError(Exception):
    """Base for all formtree-specific errors."""


class ConfigurationError(FormtreeError):
    """Raised when validation configuration is incomplete.

    Typically raised by ``validate()`` when neither the node nor the
    active ``ValidationConfig`` names a field validator.
    """
