"""Render SVG entries from a compiled Library.

render() looks up a key and rebuilds the markup with caller attributes
inserted right after the literal ``<svg`` token:

    open_tag + attrs + content + close_tag

Attribute names have every "_" replaced by "-". Values are quoted as JSON
literals, so plain strings come out as ``"value"``, quotes and backslashes
are escaped, and bools/numbers/None render as ``true``, ``24``, ``null``.

Attributes given as a mapping are sorted by key before rendering;
attributes given as a sequence of pairs keep the caller's order.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

from glyph_core.errors import SvgNotFoundError
from glyph_core.models import Library

Attrs = Mapping[Any, Any] | Sequence[tuple[Any, Any]] | None


def normalize_attr_name(name: Any) -> str:
    """Convert an attribute name to its rendered form.

    Example:
        >>> normalize_attr_name("phx_click")
        'phx-click'
    """
    return str(name).replace("_", "-")


def quote_attr_value(value: Any) -> str:
    """Quote an attribute value as a JSON literal.

    Example:
        >>> quote_attr_value("h-5 w-5")
        '"h-5 w-5"'
        >>> quote_attr_value(24)
        '24'
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return json.dumps(value, ensure_ascii=False)
    return json.dumps(str(value), ensure_ascii=False)


def attr_pairs(attrs: Attrs) -> list[tuple[Any, Any]]:
    """Return attributes as an ordered list of (name, value) pairs.

    Mappings are sorted by the string form of their keys; sequences
    are returned in the given order.
    """
    if attrs is None:
        return []
    if isinstance(attrs, Mapping):
        return sorted(attrs.items(), key=lambda item: str(item[0]))
    return [(name, value) for name, value in attrs]


def render_attrs(attrs: Attrs) -> str:
    """Render attributes as a string of ' name=value' fragments.

    Example:
        >>> render_attrs([("class", "a"), ("@click", "go")])
        ' class="a" @click="go"'
    """
    return "".join(
        f" {normalize_attr_name(name)}={quote_attr_value(value)}"
        for name, value in attr_pairs(attrs)
    )


class RenderResult(BaseModel):
    """Outcome of a render call.

    Exactly one of ``svg`` and ``error`` is set.

    Attributes:
        svg: Rendered markup on success.
        error: Error message on failure.
        key: Requested key.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str
    svg: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True when rendering succeeded."""
        return self.svg is not None

    def unwrap(self) -> str:
        """Return the markup or raise the render error.

        Raises:
            SvgNotFoundError: If the key was not found.
        """
        if self.svg is None:
            raise SvgNotFoundError(self.key)
        return self.svg

    def unwrap_or(self, default: str) -> str:
        """Return the markup, or default when rendering failed."""
        return self.svg if self.svg is not None else default


def render(library: Library, key: str, attrs: Attrs = None) -> RenderResult:
    """Render an SVG from the library.

    Args:
        library: Compiled library.
        key: Key of the SVG (e.g. "heroicons/menu").
        attrs: Attributes to insert into the <svg> tag, as a sequence of
            (name, value) pairs or a mapping.

    Returns:
        RenderResult carrying either the markup or the error message.

    Example:
        >>> render(library, "heroicons/menu", {"class": "h-5 w-5"}).unwrap()
        '<svg class="h-5 w-5" xmlns= ... </svg>'
    """
    entry = library.get(key)
    if entry is None:
        return RenderResult(key=key, error=str(SvgNotFoundError(key)))

    return RenderResult(
        key=key,
        svg=entry.open_tag + render_attrs(attrs) + entry.content + entry.close_tag,
    )


def render_strict(library: Library, key: str, attrs: Attrs = None) -> str:
    """Render an SVG from the library, raising if the key is missing.

    Args:
        library: Compiled library.
        key: Key of the SVG.
        attrs: Attributes to insert into the <svg> tag.

    Returns:
        Rendered markup.

    Raises:
        SvgNotFoundError: If key is not in the library.
    """
    return render(library, key, attrs).unwrap()
