"""
Charset builder: turn character-class flags into the sampling alphabet.
"""

from __future__ import annotations

from .config import CLASS_CHARS, CLASS_ORDER, GenerationOptions


def enabled_classes(options: GenerationOptions) -> tuple[str, ...]:
    flags = options.class_flags()
    return tuple(name for name in CLASS_ORDER if flags[name])


def build_alphabet(options: GenerationOptions) -> str:
    """
    Concatenate the enabled class strings in fixed order:
    uppercase, lowercase, numbers, symbols.

    With every class disabled the result is "", which callers must treat
    as "nothing to sample", not as a usable alphabet.
    """
    return "".join(CLASS_CHARS[name] for name in enabled_classes(options))


def is_empty_alphabet(alphabet: str) -> bool:
    return len(alphabet) == 0
