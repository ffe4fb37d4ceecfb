# topmark:header:start
#
#   project      : SchemaMark
#   file         : model.py
#   file_relpath : src/schemamark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `RenderConfig`: an immutable, runtime snapshot used by the renderers.
    - `MutableRenderConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `RenderConfig` and thawed back for edits.

Merge order (lowest -> highest precedence):
    1) Built-in defaults (``schemamark/config/schemamark-default.toml``)
    2) Project config: ``schemamark.toml`` in the working directory, else the
       ``[tool.schemamark]`` table of ``pyproject.toml``
    3) Extra config files passed explicitly (``--config``), in the order given
    4) CLI / API overrides (`MutableRenderConfig.apply_overrides`)

Immutability:
    - `RenderConfig` stores tuples and frozen option dataclasses and is
      ``frozen=True``. Use `RenderConfig.thaw` -> edit ->
      `MutableRenderConfig.freeze` for safe updates.

Diagnostics:
    Unknown keys and invalid values never abort loading; they are collected as
    WARNING diagnostics on the draft. A config file that cannot be read or
    parsed yields an ERROR diagnostic.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from schemamark.config.io import (
    get_table_value,
    load_defaults_dict,
    load_defaults_text,
    load_pyproject_table,
    load_toml_dict,
    to_toml,
)
from schemamark.config.logging import get_logger
from schemamark.config.options import (
    HtmlOptions,
    JsonLdOptions,
    MutableHtmlOptions,
    MutableJsonLdOptions,
)
from schemamark.constants import (
    DEFAULT_CONTEXT,
    DEFAULT_MAX_DEPTH,
    PROJECT_CONFIG_NAME,
    PYPROJECT_CONFIG_NAME,
)
from schemamark.core.diagnostics import Diagnostic, DiagnosticLevel
from schemamark.rendering.formats import RenderFormat

if TYPE_CHECKING:
    from collections.abc import Iterable

    from schemamark.config.io import TomlTable
    from schemamark.config.logging import SchemaMarkLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: SchemaMarkLogger = get_logger(__name__)

CLI_OVERRIDE_STR = "<CLI overrides>"

_TOP_LEVEL_KEYS: frozenset[str] = frozenset(
    {"context", "default_format", "max_depth", "strict", "json_ld", "microdata", "rdfa"}
)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable runtime configuration for SchemaMark.

    Attributes:
        context (str): Vocabulary context for entities created without one.
        default_format (RenderFormat): Format used when none is requested.
        max_depth (int): Maximum entity nesting depth (``0`` disables the guard).
        strict (bool): Check entities before rendering and refuse malformed ones.
        json_ld (JsonLdOptions): JSON-LD renderer options.
        microdata (HtmlOptions): Microdata renderer options.
        rdfa (HtmlOptions): RDFa renderer options.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings or errors encountered while
            loading or merging config.
    """

    context: str = DEFAULT_CONTEXT
    default_format: RenderFormat = RenderFormat.JSON_LD
    max_depth: int = DEFAULT_MAX_DEPTH
    strict: bool = False
    json_ld: JsonLdOptions = field(default_factory=JsonLdOptions)
    microdata: HtmlOptions = field(default_factory=HtmlOptions)
    rdfa: HtmlOptions = field(default_factory=HtmlOptions)
    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def options_for(self, fmt: RenderFormat) -> JsonLdOptions | HtmlOptions:
        """Return the renderer options for ``fmt``."""
        match fmt:
            case RenderFormat.JSON_LD:
                return self.json_ld
            case RenderFormat.MICRODATA:
                return self.microdata
            case RenderFormat.RDFA:
                return self.rdfa

    def to_toml_dict(self, *, include_files: bool = False) -> TomlTable:
        """Convert this config into a TOML-serializable dict.

        Args:
            include_files (bool): Whether to include the ``config_files`` provenance
                list (as a top-level ``config_files`` array).

        Returns:
            TomlTable: The TOML-serializable dict.
        """
        toml_dict: TomlTable = {
            "context": self.context,
            "default_format": self.default_format.key,
            "max_depth": self.max_depth,
            "strict": self.strict,
            "json_ld": self.json_ld.to_toml_table(),
            "microdata": self.microdata.to_toml_table(),
            "rdfa": self.rdfa.to_toml_table(),
        }
        if include_files and self.config_files:
            toml_dict["config_files"] = [str(p) for p in self.config_files]
        return toml_dict

    def thaw(self) -> MutableRenderConfig:
        """Return a mutable copy of this frozen config."""
        return MutableRenderConfig(
            context=self.context,
            default_format=self.default_format,
            max_depth=self.max_depth,
            strict=self.strict,
            json_ld=self.json_ld.thaw(),
            microdata=self.microdata.thaw(),
            rdfa=self.rdfa.thaw(),
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableRenderConfig:
    """Mutable configuration used during discovery and merging.

    Scalar fields are tri-state: ``None`` means "not set by this layer" and is
    resolved against the built-in defaults in `freeze`.
    """

    context: str | None = None
    default_format: RenderFormat | None = None
    max_depth: int | None = None
    strict: bool | None = None

    json_ld: MutableJsonLdOptions = field(default_factory=MutableJsonLdOptions)
    microdata: MutableHtmlOptions = field(default_factory=MutableHtmlOptions)
    rdfa: MutableHtmlOptions = field(default_factory=MutableHtmlOptions)

    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: list[Diagnostic] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> RenderConfig:
        """Freeze this mutable builder into an immutable `RenderConfig`."""
        self.sanitize()
        return RenderConfig(
            context=self.context if self.context is not None else DEFAULT_CONTEXT,
            default_format=(
                self.default_format if self.default_format is not None else RenderFormat.JSON_LD
            ),
            max_depth=self.max_depth if self.max_depth is not None else DEFAULT_MAX_DEPTH,
            strict=bool(self.strict),
            json_ld=self.json_ld.freeze(),
            microdata=self.microdata.freeze(),
            rdfa=self.rdfa.freeze(),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    def sanitize(self) -> None:
        """Normalize and validate the draft in place (invalid values are dropped)."""
        if self.context is not None and not self.context.strip():
            self._warn("empty context; using the default", "context")
            self.context = None
        if self.max_depth is not None and self.max_depth < 0:
            self._warn(f"negative max_depth {self.max_depth}; using the default", "max_depth")
            self.max_depth = None

    def _warn(self, message: str, where: str) -> None:
        logger.debug("Config warning at %s: %s", where, message)
        self.diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message, where))

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    @functools.cache
    def get_default_config_toml(cls) -> str:
        """Return the bundled default configuration document (comments included)."""
        return load_defaults_text()

    @classmethod
    def from_defaults(cls) -> MutableRenderConfig:
        """Load the default configuration from the bundled TOML resource."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        config_file: Path | None = None,
    ) -> MutableRenderConfig:
        """Create a draft config from a parsed TOML dict.

        Args:
            data (TomlTable): The parsed TOML data.
            config_file (Path | None): Optional path to the source file (provenance).

        Returns:
            MutableRenderConfig: The resulting draft. Problems are recorded in
                ``diagnostics`` rather than raised.
        """
        draft: MutableRenderConfig = cls()
        if config_file is not None:
            draft.config_files = [config_file]

        where_prefix: str = f"{config_file}: " if config_file else ""

        def warn(message: str, key: str) -> None:
            draft.diagnostics.append(
                Diagnostic(DiagnosticLevel.WARNING, message, f"{where_prefix}{key}")
            )

        for key in data:
            if key not in _TOP_LEVEL_KEYS:
                warn("unknown configuration key", key)

        if "context" in data:
            if isinstance(data["context"], str):
                draft.context = data["context"]
            else:
                warn("expected a string; ignored", "context")

        if "default_format" in data:
            fmt: RenderFormat | None = RenderFormat.parse(str(data["default_format"]))
            if fmt is None:
                warn(
                    f"unknown format {data['default_format']!r} "
                    f"(expected one of: {', '.join(RenderFormat.keys())}); ignored",
                    "default_format",
                )
            draft.default_format = fmt

        if "max_depth" in data:
            value: Any = data["max_depth"]
            if isinstance(value, int) and not isinstance(value, bool):
                draft.max_depth = value
            else:
                warn("expected an integer; ignored", "max_depth")

        if "strict" in data:
            if isinstance(data["strict"], bool):
                draft.strict = data["strict"]
            else:
                warn("expected a boolean; ignored", "strict")

        json_ld_tbl: TomlTable = get_table_value(data, "json_ld")
        logger.trace("TOML [json_ld]: %s", json_ld_tbl)
        microdata_tbl: TomlTable = get_table_value(data, "microdata")
        logger.trace("TOML [microdata]: %s", microdata_tbl)
        rdfa_tbl: TomlTable = get_table_value(data, "rdfa")
        logger.trace("TOML [rdfa]: %s", rdfa_tbl)

        section_diags: list[Diagnostic] = []
        draft.json_ld = MutableJsonLdOptions.from_toml_table(
            json_ld_tbl, section="json_ld", diagnostics=section_diags
        )
        draft.microdata = MutableHtmlOptions.from_toml_table(
            microdata_tbl, section="microdata", diagnostics=section_diags
        )
        draft.rdfa = MutableHtmlOptions.from_toml_table(
            rdfa_tbl, section="rdfa", diagnostics=section_diags
        )
        draft.diagnostics.extend(
            Diagnostic(d.level, d.message, f"{where_prefix}{d.where}") for d in section_diags
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableRenderConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``schemamark.toml`` and ``pyproject.toml`` (from which the
        ``[tool.schemamark]`` table is extracted).

        Returns:
            MutableRenderConfig | None: The draft, or ``None`` if the file cannot
                be read or parsed, or a ``pyproject.toml`` has no SchemaMark table.
        """
        logger.debug("Creating MutableRenderConfig from TOML config: %s", path)
        data: TomlTable | None
        if path.name == PYPROJECT_CONFIG_NAME:
            data = load_pyproject_table(path)
        else:
            data = load_toml_dict(path)
        if data is None:
            return None
        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_project_config_file(cls, start: Path | None = None) -> Path | None:
        """Return the project config file for ``start`` (default: CWD), if any.

        ``schemamark.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
        counts when it has a ``[tool.schemamark]`` table.
        """
        base: Path = (start or Path.cwd()).resolve()
        if base.is_file():
            base = base.parent
        candidate: Path = base / PROJECT_CONFIG_NAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate
        pyproject: Path = base / PYPROJECT_CONFIG_NAME
        if pyproject.is_file() and load_pyproject_table(pyproject) is not None:
            logger.debug("Discovered config file: %s", pyproject)
            return pyproject
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableRenderConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            start (Path | None): Discovery directory (default: CWD).
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                after discovery, in the given order. A file that cannot be loaded
                adds an ERROR diagnostic.
            no_config (bool): If True, skip project discovery.

        Returns:
            MutableRenderConfig: A draft ready to be frozen or further edited.
        """
        draft: MutableRenderConfig = cls.from_defaults()

        if not no_config:
            project_file: Path | None = cls.discover_project_config_file(start)
            if project_file is not None:
                project_cfg: MutableRenderConfig | None = cls.from_toml_file(project_file)
                if project_cfg is not None:
                    draft = draft.merge_with(project_cfg)

        for extra in extra_config_files or ():
            mc: MutableRenderConfig | None = cls.from_toml_file(Path(extra))
            if mc is None:
                draft.diagnostics.append(
                    Diagnostic(
                        DiagnosticLevel.ERROR,
                        "cannot load configuration file",
                        str(extra),
                    )
                )
                continue
            draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableRenderConfig) -> MutableRenderConfig:
        """Return a new draft where values set in ``other`` override this draft."""

        def pick(current: Any, override: Any) -> Any:
            return override if override is not None else current

        return MutableRenderConfig(
            context=pick(self.context, other.context),
            default_format=pick(self.default_format, other.default_format),
            max_depth=pick(self.max_depth, other.max_depth),
            strict=pick(self.strict, other.strict),
            json_ld=self.json_ld.merge_with(other.json_ld),
            microdata=self.microdata.merge_with(other.microdata),
            rdfa=self.rdfa.merge_with(other.rdfa),
            config_files=self.config_files + other.config_files,
            diagnostics=self.diagnostics + other.diagnostics,
        )

    def apply_overrides(self, args: ArgsLike) -> MutableRenderConfig:
        """Apply CLI/API overrides in place and return ``self``.

        Recognized keys (``None`` values are ignored): ``context``,
        ``default_format`` (a `RenderFormat` or its name), ``max_depth``,
        ``strict``, ``pretty_print`` (applies to all three formats),
        ``include_script_tag``, ``compact_output``.

        Raises:
            ValueError: If ``default_format`` names an unknown format.
        """
        logger.debug("Applying overrides to MutableRenderConfig: %s", args)
        applied: bool = False

        def given(key: str) -> bool:
            return key in args and args[key] is not None

        if given("context"):
            self.context = str(args["context"])
            applied = True
        if given("default_format"):
            raw: Any = args["default_format"]
            fmt: RenderFormat | None = (
                raw if isinstance(raw, RenderFormat) else RenderFormat.parse(str(raw))
            )
            if fmt is None:
                raise ValueError(f"Unknown render format: {raw!r}")
            self.default_format = fmt
            applied = True
        if given("max_depth"):
            self.max_depth = int(args["max_depth"])
            applied = True
        if given("strict"):
            self.strict = bool(args["strict"])
            applied = True
        if given("pretty_print"):
            pretty: bool = bool(args["pretty_print"])
            self.json_ld.pretty_print = pretty
            self.microdata.pretty_print = pretty
            self.rdfa.pretty_print = pretty
            applied = True
        if given("include_script_tag"):
            self.json_ld.include_script_tag = bool(args["include_script_tag"])
            applied = True
        if given("compact_output"):
            self.json_ld.compact_output = bool(args["compact_output"])
            applied = True

        if applied:
            self.config_files.append(CLI_OVERRIDE_STR)
        return self

    def to_toml(self) -> str:
        """Render the frozen view of this draft as a TOML document."""
        return to_toml(self.freeze().to_toml_dict())
