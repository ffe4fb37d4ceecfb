# topmark:header:start
#
#   project      : SchemaMark
#   file         : options.py
#   file_relpath : src/schemamark/config/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-renderer option model (JSON-LD and the two HTML formats).

Design:
    * ``MutableJsonLdOptions`` / ``MutableHtmlOptions`` use tri-state fields
      (value or ``None``) to represent explicit values vs. *unset*. This enables
      non-destructive merges when composing several sources
      (defaults -> project config -> ``--config`` files -> CLI).
    * ``JsonLdOptions`` / ``HtmlOptions`` are the fully-resolved, immutable
      runtime view consumed by the renderers.
    * ``resolve(base)`` fills unset fields from ``base``; ``freeze()`` resolves
      against the built-in defaults.

TOML mapping:

    [json_ld]
    pretty_print = true
    unescape_slashes = true
    unescape_unicode = true
    include_script_tag = false
    compact_output = false
    nested_context = "when-changed"

    [microdata]            # same keys for [rdfa]
    pretty_print = true
    container_element = "div"
    use_semantic_elements = false
    include_meta_elements = false
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from schemamark.config.logging import get_logger
from schemamark.core.diagnostics import Diagnostic, DiagnosticLevel
from schemamark.rendering.formats import NestedContext

if TYPE_CHECKING:
    from collections.abc import Mapping

    from schemamark.config.logging import SchemaMarkLogger

logger: SchemaMarkLogger = get_logger(__name__)

# Plain HTML element names only; no attributes or markup can sneak in
_ELEMENT_NAME_RE: re.Pattern[str] = re.compile(r"[A-Za-z][A-Za-z0-9-]*")


@dataclass(frozen=True, slots=True)
class JsonLdOptions:
    """Resolved JSON-LD renderer options.

    Attributes:
        pretty_print (bool): Indent the document with two spaces per level.
        unescape_slashes (bool): Write ``/`` as is; when False it is written as ``\\/``.
        unescape_unicode (bool): Write non-ASCII characters as is; when False they
            are ``\\uXXXX``-escaped.
        include_script_tag (bool): Wrap the document in a
            ``<script type="application/ld+json">`` element.
        compact_output (bool): Drop ``null``, ``""``, empty arrays and objects that
            become empty (never the ``@`` keys).
        nested_context (NestedContext): When nested objects repeat ``@context``.
    """

    pretty_print: bool = True
    unescape_slashes: bool = True
    unescape_unicode: bool = True
    include_script_tag: bool = False
    compact_output: bool = False
    nested_context: NestedContext = NestedContext.WHEN_CHANGED

    def thaw(self) -> MutableJsonLdOptions:
        """Return a mutable builder initialized from these options."""
        return MutableJsonLdOptions(
            pretty_print=self.pretty_print,
            unescape_slashes=self.unescape_slashes,
            unescape_unicode=self.unescape_unicode,
            include_script_tag=self.include_script_tag,
            compact_output=self.compact_output,
            nested_context=self.nested_context,
        )

    def to_toml_table(self) -> dict[str, Any]:
        """Return the TOML-friendly table for these options."""
        return {
            "pretty_print": self.pretty_print,
            "unescape_slashes": self.unescape_slashes,
            "unescape_unicode": self.unescape_unicode,
            "include_script_tag": self.include_script_tag,
            "compact_output": self.compact_output,
            "nested_context": self.nested_context.key,
        }


@dataclass(frozen=True, slots=True)
class HtmlOptions:
    """Resolved options shared by the Microdata and RDFa renderers.

    Attributes:
        pretty_print (bool): One element per line, indented two spaces per level.
        container_element (str): Element used for scoped containers.
        use_semantic_elements (bool): Pick elements by type/property name
            (``article``, ``h1``, ``p``, ...) instead of ``span``.
        include_meta_elements (bool): Render non-visible properties (publication
            dates, word count, identifier) as ``<meta>`` elements.
    """

    pretty_print: bool = True
    container_element: str = "div"
    use_semantic_elements: bool = False
    include_meta_elements: bool = False

    def __post_init__(self) -> None:
        if not _ELEMENT_NAME_RE.fullmatch(self.container_element):
            raise ValueError(f"Invalid container element name: {self.container_element!r}")

    def thaw(self) -> MutableHtmlOptions:
        """Return a mutable builder initialized from these options."""
        return MutableHtmlOptions(
            pretty_print=self.pretty_print,
            container_element=self.container_element,
            use_semantic_elements=self.use_semantic_elements,
            include_meta_elements=self.include_meta_elements,
        )

    def to_toml_table(self) -> dict[str, Any]:
        """Return the TOML-friendly table for these options."""
        return {
            "pretty_print": self.pretty_print,
            "container_element": self.container_element,
            "use_semantic_elements": self.use_semantic_elements,
            "include_meta_elements": self.include_meta_elements,
        }


def _pick(current: Any, override: Any) -> Any:
    return override if override is not None else current


def _bool_or_none(
    tbl: Mapping[str, Any],
    key: str,
    section: str,
    diagnostics: list[Diagnostic],
) -> bool | None:
    if key not in tbl:
        return None
    value: Any = tbl[key]
    if isinstance(value, bool):
        return value
    diagnostics.append(
        Diagnostic(
            DiagnosticLevel.WARNING,
            f"expected a boolean, got {type(value).__name__}; ignored",
            f"[{section}].{key}",
        )
    )
    return None


def _warn_unknown_keys(
    tbl: Mapping[str, Any],
    known: set[str],
    section: str,
    diagnostics: list[Diagnostic],
) -> None:
    for key in tbl:
        if key not in known:
            logger.debug("Unknown key in [%s]: %s", section, key)
            diagnostics.append(
                Diagnostic(
                    DiagnosticLevel.WARNING, "unknown configuration key", f"[{section}].{key}"
                )
            )


@dataclass
class MutableJsonLdOptions:
    """Mutable builder for `JsonLdOptions`; ``None`` means "inherit"."""

    pretty_print: bool | None = None
    unescape_slashes: bool | None = None
    unescape_unicode: bool | None = None
    include_script_tag: bool | None = None
    compact_output: bool | None = None
    nested_context: NestedContext | None = None

    def merge_with(self, other: MutableJsonLdOptions) -> MutableJsonLdOptions:
        """Return new options applying ``other`` over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override explicit values in ``self``.
        """
        return MutableJsonLdOptions(
            **{
                f.name: _pick(getattr(self, f.name), getattr(other, f.name))
                for f in fields(MutableJsonLdOptions)
            }
        )

    def resolve(self, base: JsonLdOptions) -> JsonLdOptions:
        """Resolve unset fields against ``base`` and return frozen options."""
        return JsonLdOptions(
            **{
                f.name: _pick(getattr(base, f.name), getattr(self, f.name))
                for f in fields(MutableJsonLdOptions)
            }
        )

    def freeze(self) -> JsonLdOptions:
        """Freeze using the built-in defaults for unset fields."""
        return self.resolve(JsonLdOptions())

    @classmethod
    def from_toml_table(
        cls,
        tbl: Mapping[str, Any] | None,
        *,
        section: str = "json_ld",
        diagnostics: list[Diagnostic] | None = None,
    ) -> MutableJsonLdOptions:
        """Create options from a TOML table; unspecified keys stay ``None``.

        Invalid values and unknown keys are reported as WARNING diagnostics
        (appended to ``diagnostics`` when given) and otherwise ignored.
        """
        diags: list[Diagnostic] = diagnostics if diagnostics is not None else []
        if not tbl:
            return cls()

        nested_context: NestedContext | None = None
        raw_nested: Any = tbl.get("nested_context")
        if raw_nested is not None:
            nested_context = NestedContext.parse(str(raw_nested))
            if nested_context is None:
                diags.append(
                    Diagnostic(
                        DiagnosticLevel.WARNING,
                        f"invalid value {raw_nested!r} (expected one of: "
                        f"{', '.join(NestedContext.keys())}); ignored",
                        f"[{section}].nested_context",
                    )
                )

        _warn_unknown_keys(tbl, {f.name for f in fields(cls)}, section, diags)
        return cls(
            pretty_print=_bool_or_none(tbl, "pretty_print", section, diags),
            unescape_slashes=_bool_or_none(tbl, "unescape_slashes", section, diags),
            unescape_unicode=_bool_or_none(tbl, "unescape_unicode", section, diags),
            include_script_tag=_bool_or_none(tbl, "include_script_tag", section, diags),
            compact_output=_bool_or_none(tbl, "compact_output", section, diags),
            nested_context=nested_context,
        )


@dataclass
class MutableHtmlOptions:
    """Mutable builder for `HtmlOptions`; ``None`` means "inherit"."""

    pretty_print: bool | None = None
    container_element: str | None = None
    use_semantic_elements: bool | None = None
    include_meta_elements: bool | None = None

    def merge_with(self, other: MutableHtmlOptions) -> MutableHtmlOptions:
        """Return new options applying ``other`` over ``self`` (last-wins)."""
        return MutableHtmlOptions(
            **{
                f.name: _pick(getattr(self, f.name), getattr(other, f.name))
                for f in fields(MutableHtmlOptions)
            }
        )

    def resolve(self, base: HtmlOptions) -> HtmlOptions:
        """Resolve unset fields against ``base`` and return frozen options."""
        return HtmlOptions(
            **{
                f.name: _pick(getattr(base, f.name), getattr(self, f.name))
                for f in fields(MutableHtmlOptions)
            }
        )

    def freeze(self) -> HtmlOptions:
        """Freeze using the built-in defaults for unset fields."""
        return self.resolve(HtmlOptions())

    @classmethod
    def from_toml_table(
        cls,
        tbl: Mapping[str, Any] | None,
        *,
        section: str,
        diagnostics: list[Diagnostic] | None = None,
    ) -> MutableHtmlOptions:
        """Create options from a TOML table; unspecified keys stay ``None``."""
        diags: list[Diagnostic] = diagnostics if diagnostics is not None else []
        if not tbl:
            return cls()

        container: str | None = None
        raw_container: Any = tbl.get("container_element")
        if raw_container is not None:
            if isinstance(raw_container, str) and _ELEMENT_NAME_RE.fullmatch(raw_container):
                container = raw_container.lower()
            else:
                diags.append(
                    Diagnostic(
                        DiagnosticLevel.WARNING,
                        f"invalid element name {raw_container!r}; ignored",
                        f"[{section}].container_element",
                    )
                )

        _warn_unknown_keys(tbl, {f.name for f in fields(cls)}, section, diags)
        return cls(
            pretty_print=_bool_or_none(tbl, "pretty_print", section, diags),
            container_element=container,
            use_semantic_elements=_bool_or_none(tbl, "use_semantic_elements", section, diags),
            include_meta_elements=_bool_or_none(tbl, "include_meta_elements", section, diags),
        )
