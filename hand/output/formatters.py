"""
Formatting functions for status lines.

This module composes the rendered text of a status line: the message
template, the head (mark glyph), the optional scope prefix and the
trailing newline. Nothing here performs I/O.
"""

import functools
from string import Formatter
from typing import Any, Callable, Tuple, Union

from hand.errors import TemplateArityError, TemplateError

from .marks import Mark, MarkKind, lookup
from .styles import DIM

Head = Union[str, Mark, MarkKind]

_formatter = Formatter()
_CONVERSIONS = (None, "r", "s", "a")


def _placeholder_arity(template: str) -> Tuple[int, int]:
    """Count the arguments a template consumes.

    Returns:
        (expected, referenced): the number of arguments the template needs
        and how many distinct ones it actually displays. The two differ only
        when explicit indices skip an argument.
    """
    auto = 0
    indices = set()

    try:
        fields = list(_formatter.parse(template))
    except ValueError as e:
        raise TemplateError(f"Malformed template {template!r}: {e}", template=template) from e

    for _, field_name, format_spec, conversion in fields:
        if field_name is None:
            continue
        if conversion not in _CONVERSIONS:
            raise TemplateError(f"Unknown conversion !{conversion} in {template!r}", template=template)
        if format_spec and ("{" in format_spec or "}" in format_spec):
            raise TemplateError(f"Nested placeholders are not supported: {template!r}", template=template)

        # "0.real" and "0[1]" index into argument 0
        name = field_name.split(".", 1)[0].split("[", 1)[0]
        if name == "":
            auto += 1
        elif name.isdecimal():
            indices.add(int(name))
        else:
            raise TemplateError(f"Named placeholder {{{name}}} in {template!r}; pass values positionally", template=template)

    if auto and indices:
        raise TemplateError(f"Cannot mix automatic and manual field numbering: {template!r}", template=template)

    if indices:
        return max(indices) + 1, len(indices)
    return auto, auto


def check_arity(template: str, args: Tuple[Any, ...]) -> None:
    """Raise TemplateArityError unless every argument fills a placeholder."""
    expected, referenced = _placeholder_arity(template)
    if expected != len(args) or referenced != len(args):
        raise TemplateArityError(template, expected, len(args), unused=expected - referenced)


def format_message(template, *args: Any) -> str:
    """Substitute positional arguments into a message template.

    Placeholders use ``str.format`` syntax; ``{}`` consumes the next argument.
    The arity is checked before anything is rendered.

    Args:
        template: The message template
        *args: Values for the placeholders, in order

    Returns:
        The formatted message

    Raises:
        TemplateArityError: If placeholders and arguments do not match
        TemplateError: If the template is malformed
    """
    template = str(template)
    check_arity(template, args)
    return template.format(*args)


def resolve_head(head: Head, colors: bool = True) -> str:
    """Turn a head (plain text, Mark or MarkKind) into display text."""
    if isinstance(head, MarkKind):
        head = lookup(head)
    if isinstance(head, Mark):
        return head.render(colors=colors)
    return str(head)


def render(head: Head, template, *args: Any, colors: bool = True) -> str:
    """Render ``head + " " + message`` with no trailing newline."""
    return f"{resolve_head(head, colors=colors)} {format_message(template, *args)}"


def format_scope(scope, colors: bool = True) -> str:
    """Format a scope label as a dim ``[label]``."""
    return DIM.apply(f"[{scope}]", colors=colors)


def wrap_scope(scope, inner: str, colors: bool = True) -> str:
    """Prefix already-rendered text with a scope label.

    The inner text is not altered; wrapping twice nests the labels.
    """
    return f"{format_scope(scope, colors=colors)} {inner}"


def render_scoped(scope, head: Head, template, *args: Any, colors: bool = True) -> str:
    """Render ``[scope] head message`` with no trailing newline."""
    return wrap_scope(scope, render(head, template, *args, colors=colors), colors=colors)


def with_newline(render_fn: Callable[..., str]) -> Callable[..., str]:
    """Derive the newline form of a renderer: its output plus one ``\\n``."""

    @functools.wraps(render_fn)
    def wrapper(*args: Any, **kwargs: Any) -> str:
        return render_fn(*args, **kwargs) + "\n"

    return wrapper


renderln = with_newline(render)
render_scopedln = with_newline(render_scoped)
