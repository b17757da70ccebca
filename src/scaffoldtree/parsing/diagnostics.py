"""
Diagnostics for structure file parsing.

This module holds the diagnostic value type, the severity table of the
diagnostic taxonomy and the collector that accumulates diagnostics in
emission order and applies the error policy.
"""

import logging

from attrs import frozen

from scaffoldtree.core.options import ParseOptions
from scaffoldtree.core.types import DiagnosticCode, ErrorPolicy, Severity
from scaffoldtree.exceptions import StructureParseError

logger = logging.getLogger(__name__)


@frozen
class Diagnostic:
    """
    One problem found in a structure file.

    Params:
        line: 1-based source line number
        message: Human readable description
        severity: INFO, WARNING or ERROR
        code: Stable diagnostic code
    """

    line: int
    message: str
    severity: Severity
    code: DiagnosticCode

    def format(self, file_name: str | None = None) -> str:
        """Render as `file:line: severity [code] message` for terminal output."""
        location = f"{file_name}:{self.line}" if file_name else f"line {self.line}"
        return f"{location}: {self.severity.value} [{self.code.value}] {self.message}"


# (loose severity, strict severity)
SEVERITY_TABLE: dict[DiagnosticCode, tuple[Severity, Severity]] = {
    DiagnosticCode.INDENT_TABS: (Severity.INFO, Severity.WARNING),
    DiagnosticCode.INDENT_SKIP_LEVEL: (Severity.WARNING, Severity.ERROR),
    DiagnosticCode.INDENT_MISALIGNED: (Severity.WARNING, Severity.ERROR),
    DiagnosticCode.CHILD_OF_FILE_LOOSE: (Severity.WARNING, Severity.ERROR),
    DiagnosticCode.CHILD_OF_FILE: (Severity.WARNING, Severity.ERROR),
    DiagnosticCode.PATH_COLON: (Severity.WARNING, Severity.ERROR),
    DiagnosticCode.MISSING_PARENT: (Severity.WARNING, Severity.ERROR),
    DiagnosticCode.UNKNOWN_ANNOTATION: (Severity.INFO, Severity.INFO),
}


def severity_for(code: DiagnosticCode, options: ParseOptions) -> Severity:
    """Look up the severity of a diagnostic code under the given options."""
    loose, strict = SEVERITY_TABLE[code]
    return strict if options.is_strict else loose


def child_of_file_code(options: ParseOptions) -> DiagnosticCode:
    """Code reported for an entry indented under a file."""
    if options.is_strict:
        return DiagnosticCode.CHILD_OF_FILE
    return DiagnosticCode.CHILD_OF_FILE_LOOSE


def make_diagnostic(
    code: DiagnosticCode, line: int, message: str, options: ParseOptions
) -> Diagnostic:
    """Create a diagnostic with the severity the taxonomy assigns to `code`."""
    return Diagnostic(
        line=line, message=message, severity=severity_for(code, options), code=code
    )


class DiagnosticCollector:
    """
    Ordered accumulator of diagnostics.

    Under the fail-fast policy the first error-level diagnostic raises
    `StructureParseError` instead of being collected.
    """

    def __init__(self, options: ParseOptions):
        self.options = options
        self.diagnostics: list[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> None:
        if (
            self.options.policy == ErrorPolicy.FAIL_FAST
            and diagnostic.severity == Severity.ERROR
        ):
            logger.debug(
                "Stopping parse of %s at line %d: %s",
                self.options.file_name,
                diagnostic.line,
                diagnostic.code.value,
            )
            raise StructureParseError(self.options.file_name, diagnostic)
        self.diagnostics.append(diagnostic)

    def extend(self, diagnostics: list[Diagnostic]) -> None:
        for diagnostic in diagnostics:
            self.add(diagnostic)
