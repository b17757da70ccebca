"""
Entry line parsing.

Splits an entry's content into its structural part and an optional inline
comment, then extracts the path token and the `@stub:`, `@include:` and
`@exclude:` annotations.
"""

from attrs import field, frozen

from scaffoldtree.core.options import ParseOptions
from scaffoldtree.core.path_utils import strip_trailing_slashes
from scaffoldtree.core.types import DiagnosticCode
from scaffoldtree.parsing.diagnostics import Diagnostic, make_diagnostic

STUB_PREFIX = "@stub:"
INCLUDE_PREFIX = "@include:"
EXCLUDE_PREFIX = "@exclude:"
ANNOTATION_MARKER = "@"


@frozen
class ParsedEntry:
    """
    Structural content of one entry line.

    Params:
        segment_name: Path token with trailing slashes stripped
        is_dir: True when the path token ends with "/"
        stub: Last `@stub:` value on the line
        include: `@include:` globs in source order
        exclude: `@exclude:` globs in source order
        extra_tokens: Tokens after the path that are not known annotations
    """

    segment_name: str
    is_dir: bool
    stub: str | None = None
    include: tuple[str, ...] = field(default=(), converter=tuple)
    exclude: tuple[str, ...] = field(default=(), converter=tuple)
    extra_tokens: tuple[str, ...] = field(default=(), converter=tuple)


def find_inline_comment(content: str) -> int:
    """
    Find where an inline comment starts.

    A `#` or `//` only starts a comment when it is preceded by a space or a
    tab, so it is never the first character.

    Params:
        content: Entry content with leading indentation removed

    Returns:
        Index of the comment marker, or -1 if there is no inline comment
    """
    for i in range(1, len(content)):
        if content[i - 1] not in " \t":
            continue
        if content[i] == "#" or content.startswith("//", i):
            return i
    return -1


def split_inline_comment(content: str) -> tuple[str, str | None]:
    """
    Split entry content into structural content and inline comment.

    Returns:
        Tuple of (content before the marker, comment from the marker on or None)
    """
    cut = find_inline_comment(content)
    if cut == -1:
        return content, None
    return content[:cut], content[cut:]


def split_globs(value: str) -> list[str]:
    """Split a comma separated glob list, dropping empty items."""
    return [part.strip() for part in value.split(",") if part.strip()]


def parse_entry(
    content: str, line_number: int, options: ParseOptions
) -> tuple[ParsedEntry | None, list[Diagnostic]]:
    """
    Parse the content of one entry line.

    Params:
        content: Entry content with leading indentation removed
        line_number: 1-based line number for diagnostics
        options: Parser options (severity profile)

    Returns:
        Tuple of (ParsedEntry, or None if nothing is left once the inline
        comment is removed, and the diagnostics for this line)
    """
    structural, _ = split_inline_comment(content)
    tokens = structural.split()
    if not tokens:
        return None, []

    diagnostics: list[Diagnostic] = []
    path_token, annotation_tokens = tokens[0], tokens[1:]

    if ":" in path_token:
        diagnostics.append(
            make_diagnostic(
                DiagnosticCode.PATH_COLON,
                line_number,
                f'Path token "{path_token}" contains ":" which is reserved for annotations.',
                options,
            )
        )

    stub = None
    include: list[str] = []
    exclude: list[str] = []
    extra: list[str] = []

    for token in annotation_tokens:
        if token.startswith(STUB_PREFIX):
            stub = token[len(STUB_PREFIX) :]
        elif token.startswith(INCLUDE_PREFIX):
            include.extend(split_globs(token[len(INCLUDE_PREFIX) :]))
        elif token.startswith(EXCLUDE_PREFIX):
            exclude.extend(split_globs(token[len(EXCLUDE_PREFIX) :]))
        else:
            if token.startswith(ANNOTATION_MARKER):
                diagnostics.append(
                    make_diagnostic(
                        DiagnosticCode.UNKNOWN_ANNOTATION,
                        line_number,
                        f'Unknown annotation token "{token}".',
                        options,
                    )
                )
            extra.append(token)

    entry = ParsedEntry(
        segment_name=strip_trailing_slashes(path_token),
        is_dir=path_token.endswith("/"),
        stub=stub or None,
        include=include,
        exclude=exclude,
        extra_tokens=extra,
    )
    return entry, diagnostics
