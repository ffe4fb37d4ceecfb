# topmark:header:start
#
#   project      : SchemaMark
#   file         : manager.py
#   file_relpath : src/schemamark/api/manager.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`SchemaManager`: one object to create, check and render entities.

The manager binds a frozen `RenderConfig` and exposes factory shortcuts for
common types plus one render method per format:

```python
from schemamark.api import SchemaManager

schema = SchemaManager()
article = schema.article({"headline": "Hello", "author": schema.person({"name": "Ada"})})
html = schema.render_microdata(article)
```

Per-call keyword overrides (``script_tag``, ``semantic_elements``...) build a
one-off renderer; the manager itself never changes.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from schemamark.config.logging import get_logger
from schemamark.config.model import MutableRenderConfig, RenderConfig
from schemamark.core.checks import check_entity
from schemamark.core.entity import SchemaEntity
from schemamark.rendering.formats import RenderFormat
from schemamark.rendering.registry import get_renderer, get_renderer_class

if TYPE_CHECKING:
    from schemamark.config.logging import SchemaMarkLogger
    from schemamark.config.options import HtmlOptions, JsonLdOptions
    from schemamark.core.diagnostics import Diagnostic
    from schemamark.rendering.base import SchemaRenderer

logger: SchemaMarkLogger = get_logger(__name__)


def _config_from(config: RenderConfig | Mapping[str, Any] | None) -> RenderConfig:
    if config is None:
        return RenderConfig()
    if isinstance(config, RenderConfig):
        return config
    # Plain mapping mirroring the TOML shape, layered over the defaults
    draft: MutableRenderConfig = MutableRenderConfig.from_defaults().merge_with(
        MutableRenderConfig.from_toml_dict(dict(config))
    )
    return draft.freeze()


class SchemaManager:
    """Facade over entity creation, checking and rendering.

    Args:
        config (RenderConfig | Mapping[str, Any] | None): A frozen config, a plain
            mapping shaped like ``schemamark.toml``, or ``None`` for the defaults.
    """

    def __init__(self, config: RenderConfig | Mapping[str, Any] | None = None) -> None:
        self._config: RenderConfig = _config_from(config)

    @property
    def config(self) -> RenderConfig:
        """The configuration every render call uses."""
        return self._config

    # ----------------------------- Factories -----------------------------
    def create(
        self,
        type: str,  # noqa: A002 - mirrors the vocabulary term
        properties: Mapping[str, Any] | None = None,
        context: str | None = None,
    ) -> SchemaEntity:
        """Create an entity of ``type`` (context defaults to the configured one)."""
        return SchemaEntity(type, properties, context or self._config.context)

    def article(self, properties: Mapping[str, Any] | None = None) -> SchemaEntity:
        """Create an ``Article``."""
        return self.create("Article", properties)

    def person(self, properties: Mapping[str, Any] | None = None) -> SchemaEntity:
        """Create a ``Person``."""
        return self.create("Person", properties)

    def organization(self, properties: Mapping[str, Any] | None = None) -> SchemaEntity:
        """Create an ``Organization``."""
        return self.create("Organization", properties)

    def thing(self, properties: Mapping[str, Any] | None = None) -> SchemaEntity:
        """Create a ``Thing``."""
        return self.create("Thing", properties)

    # ------------------------------ Checking ------------------------------
    def check(self, entity: SchemaEntity) -> list[Diagnostic]:
        """Return the structural diagnostics for ``entity``."""
        return check_entity(entity, max_depth=self._config.max_depth)

    # ------------------------------ Rendering -----------------------------
    def renderer(self, fmt: RenderFormat | str | None = None) -> SchemaRenderer[Any]:
        """Return a renderer for ``fmt`` (default: the configured default format)."""
        return get_renderer(fmt, self._config)

    def render(self, entity: SchemaEntity, fmt: RenderFormat | str | None = None) -> str:
        """Render ``entity`` in ``fmt`` (default: the configured default format)."""
        return self.renderer(fmt).render(entity)

    def render_json_ld(
        self,
        entity: SchemaEntity,
        *,
        script_tag: bool | None = None,
        pretty_print: bool | None = None,
    ) -> str:
        """Render ``entity`` as JSON-LD, optionally overriding some options."""
        options: JsonLdOptions = self._config.json_ld
        if script_tag is not None:
            options = replace(options, include_script_tag=script_tag)
        if pretty_print is not None:
            options = replace(options, pretty_print=pretty_print)
        return self._render_with(RenderFormat.JSON_LD, options, entity)

    def render_microdata(
        self,
        entity: SchemaEntity,
        *,
        semantic_elements: bool | None = None,
        meta_elements: bool | None = None,
    ) -> str:
        """Render ``entity`` as HTML Microdata, optionally overriding some options."""
        options: HtmlOptions = self._html_options(
            self._config.microdata, semantic_elements, meta_elements
        )
        return self._render_with(RenderFormat.MICRODATA, options, entity)

    def render_rdfa(
        self,
        entity: SchemaEntity,
        *,
        semantic_elements: bool | None = None,
        meta_elements: bool | None = None,
    ) -> str:
        """Render ``entity`` as HTML RDFa, optionally overriding some options."""
        options: HtmlOptions = self._html_options(
            self._config.rdfa, semantic_elements, meta_elements
        )
        return self._render_with(RenderFormat.RDFA, options, entity)

    def template_globals(self) -> dict[str, Callable[..., Any]]:
        """Return the template helper callables, keyed by their conventional names.

        Names: ``schema`` (create), ``schema_article``, ``json_ld``,
        ``microdata``, ``rdfa`` and ``schema_render``. Registering them with a
        template engine is left to the caller.
        """
        return {
            "schema": self.create,
            "schema_article": self.article,
            "json_ld": self.render_json_ld,
            "microdata": self.render_microdata,
            "rdfa": self.render_rdfa,
            "schema_render": self.render,
        }

    def _html_options(
        self,
        base: HtmlOptions,
        semantic_elements: bool | None,
        meta_elements: bool | None,
    ) -> HtmlOptions:
        options: HtmlOptions = base
        if semantic_elements is not None:
            options = replace(options, use_semantic_elements=semantic_elements)
        if meta_elements is not None:
            options = replace(options, include_meta_elements=meta_elements)
        return options

    def _render_with(
        self,
        fmt: RenderFormat,
        options: JsonLdOptions | HtmlOptions,
        entity: SchemaEntity,
    ) -> str:
        cls: type[SchemaRenderer[Any]] = get_renderer_class(fmt)
        renderer: SchemaRenderer[Any] = cls(
            options,
            max_depth=self._config.max_depth,
            strict=self._config.strict,
        )
        return renderer.render(entity)
