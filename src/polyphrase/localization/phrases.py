"""Nested phrase dictionaries as flat dotted-key mappings.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator, Mapping

from polyphrase.constants import KEY_PATH_SEPARATOR

from .types import PhraseKey, PhraseTree

__all__ = ["iter_phrases", "prefixed_key"]


def prefixed_key(key: str, prefix: str | None = None) -> PhraseKey:
    """Join prefix and key with '.'; an empty prefix leaves key as-is."""
    return f"{prefix}{KEY_PATH_SEPARATOR}{key}" if prefix else key


def iter_phrases(
    phrases: PhraseTree, prefix: str | None = None
) -> Iterator[tuple[PhraseKey, object]]:
    """Yield (flat_key, value) for every leaf of a nested phrase mapping.

    Keys of nested mappings are joined with '.'; keys that already contain
    dots are kept verbatim. Leaves are yielded in mapping order.

    Example:
        >>> dict(iter_phrases({"nav": {"hello": "Hello"}, "bye": "Bye"}))
        {'nav.hello': 'Hello', 'bye': 'Bye'}
        >>> dict(iter_phrases({"click": "Click"}, "sidebar"))
        {'sidebar.click': 'Click'}
    """
    for key, value in phrases.items():
        flat_key = prefixed_key(key, prefix)
        if isinstance(value, Mapping):
            yield from iter_phrases(value, flat_key)
        else:
            yield flat_key, value
