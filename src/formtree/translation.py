"""Error translation — raw ``(template, options)`` entries to display strings.

The translation function for a node is resolved in order:

1. the node's own ``translate_error``
2. the configured default (``ValidationConfig.translate_error``)
3. ``identity`` — the template unchanged, options discarded

``template_translator()`` builds a translation function that renders the
template with kida, using the options as context::

    translate = template_translator()
    translate(("Must be at most {{ count }} characters", {"count": 5}))
    # "Must be at most 5 characters"
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from kida import Environment

from formtree.config import ValidationConfig
from formtree.nodes import ErrorMap, FormNode, RawError, TranslateError


def identity(error: RawError) -> str:
    """Return the message template untouched, ignoring options."""
    msg, _opts = error
    return msg


def options_context(opts: Any) -> dict[str, Any]:
    """Normalize error options to a plain dict.

    Validators may hand over a mapping or a sequence of ``(key, value)``
    pairs.
    """
    if not opts:
        return {}
    if isinstance(opts, Mapping):
        return {str(k): v for k, v in opts.items()}
    return {str(k): v for k, v in opts}


def _minimal_kida_env() -> Environment:
    """Create a bare kida Environment for message templates.

    Autoescaping stays off: the rendered string is a message, and the
    rendering layer escapes it when placing it in markup.
    """
    return Environment(autoescape=False)


def template_translator(env: Environment | None = None, cache_size: int = 256) -> TranslateError:
    """Build a translation function that renders templates with kida.

    Every message is compiled as a kida template, so a validator whose
    messages contain literal ``{{`` or ``{%`` must escape them; a message
    that is not valid template syntax raises kida's syntax error out of
    ``validate()``. Compiled templates are kept in a bounded LRU cache
    (*cache_size* messages), so per-request message text cannot grow it
    without limit.

    Args:
        env: A kida Environment to compile messages with. Defaults to a
            bare environment without autoescaping.
        cache_size: Most compiled messages kept at once.
    """
    env = env or _minimal_kida_env()

    @lru_cache(maxsize=cache_size)
    def compile_message(msg: str) -> Any:
        return env.from_string(msg)

    def translate(error: RawError) -> str:
        msg, opts = error
        return compile_message(msg).render(options_context(opts))

    return translate


def resolve_translator(node: FormNode, config: ValidationConfig) -> TranslateError:
    """Return the translation function that applies to *node*."""
    return node.translate_error or config.translate_error or identity


def translate_errors(node: FormNode, config: ValidationConfig) -> ErrorMap:
    """Translate every raw entry on *node*, keeping fields and counts.

    Only this node's own errors are touched. Children resolve their own
    translator when they are validated.
    """
    translate = resolve_translator(node, config)
    return {
        name: [translate(error) for error in field_errors]
        for name, field_errors in node.errors.items()
    }
