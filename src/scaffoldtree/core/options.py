"""
Option models for the structure parser and formatter.

Options are validated pydantic models. Every public entry point accepts
either a ready-made options instance or keyword overrides, which are merged
through `resolve_options`.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from scaffoldtree.core.types import ErrorPolicy, ParseMode
from scaffoldtree.exceptions import InvalidOptionsError

DEFAULT_INDENT_STEP = 2
DEFAULT_FILE_NAME = "<structure>"


class ParseOptions(BaseModel):
    """
    Options for `parse_structure`.

    Params:
        indent_step: Spaces per indent level
        mode: Severity profile (loose repairs with warnings, strict reports errors)
        policy: COLLECT never raises, FAIL_FAST raises on the first error
        file_name: Structure file name used in error messages
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent_step: int = Field(default=DEFAULT_INDENT_STEP, ge=1)
    mode: ParseMode = ParseMode.LOOSE
    policy: ErrorPolicy = ErrorPolicy.COLLECT
    file_name: str = DEFAULT_FILE_NAME

    @model_validator(mode="before")
    @classmethod
    def _fail_fast_is_strict(cls, data: Any) -> Any:
        # Fail-fast parsing always reports with strict severities
        if isinstance(data, dict):
            policy = data.get("policy")
            if policy in (ErrorPolicy.FAIL_FAST, ErrorPolicy.FAIL_FAST.value):
                data = {**data, "mode": ParseMode.STRICT}
        return data

    @property
    def is_strict(self) -> bool:
        """Check if diagnostics are reported with strict severities."""
        return self.mode == ParseMode.STRICT


class FormatConfig(BaseModel):
    """
    The `format` section of a scaffold configuration.

    Only the keys that influence formatting are modelled; loading the
    configuration file is left to the caller.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    enabled: bool = False
    indent_step: int | None = Field(default=None, ge=1)
    mode: ParseMode = ParseMode.LOOSE
    normalize_newlines: bool = True
    trim_trailing_whitespace: bool = True
    normalize_annotations: bool = True


class FormatOptions(BaseModel):
    """
    Options for `format_structure_text`.

    Params:
        indent_step: Spaces per indent level used for re-printing entries
        mode: Parser severity profile used while formatting
        normalize_newlines: Use the dominant end-of-line style of the input
        trim_trailing_whitespace: Trim trailing whitespace on comment/blank lines
        normalize_annotations: Print annotations as @stub, @include, @exclude
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent_step: int = Field(default=DEFAULT_INDENT_STEP, ge=1)
    mode: ParseMode = ParseMode.LOOSE
    normalize_newlines: bool = True
    trim_trailing_whitespace: bool = True
    normalize_annotations: bool = True

    @classmethod
    def from_config(
        cls, config: FormatConfig | dict | None, indent_step: int | None = None
    ) -> "FormatOptions":
        """
        Build formatter options from a scaffold `format` config section.

        The indent step resolves as format section, then the top-level
        `indent_step` of the scaffold config, then the default.

        Params:
            config: The `format` section (model or raw mapping), or None
            indent_step: Top-level indent step of the scaffold config

        Returns:
            FormatOptions for the formatter
        """
        if config is None:
            config = FormatConfig()
        elif isinstance(config, dict):
            config = resolve_options(FormatConfig, None, config)

        step = config.indent_step or indent_step or DEFAULT_INDENT_STEP
        return cls(
            indent_step=step,
            mode=config.mode,
            normalize_newlines=config.normalize_newlines,
            trim_trailing_whitespace=config.trim_trailing_whitespace,
            normalize_annotations=config.normalize_annotations,
        )

    def to_parse_options(self) -> ParseOptions:
        """Parser options used by the formatter (collect policy, never raises)."""
        return ParseOptions(
            indent_step=self.indent_step, mode=self.mode, policy=ErrorPolicy.COLLECT
        )


OptionsT = TypeVar("OptionsT", bound=BaseModel)


def resolve_options(
    model: type[OptionsT], options: OptionsT | None, overrides: dict[str, Any]
) -> OptionsT:
    """
    Merge an options instance with keyword overrides.

    Params:
        model: The options model class
        options: Existing options instance, or None for defaults
        overrides: Keyword overrides applied on top

    Returns:
        A validated options instance

    Raises:
        InvalidOptionsError: If the merged values fail validation
    """
    if options is not None and not overrides:
        return options

    base = options.model_dump() if options is not None else {}
    try:
        return model.model_validate({**base, **overrides})
    except ValidationError as e:
        raise InvalidOptionsError(model.__name__, str(e)) from e
