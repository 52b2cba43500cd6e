"""
Export errors — the typed failure surface of the export pipeline.

Every failure is terminal: nothing in the pipeline retries. Each error
carries the value the user needs to act on (the format keyword, the
attempted invocation, the offending identifier).
"""

from __future__ import annotations


class ExportError(Exception):
    """Base class for all export pipeline failures."""


class UnsupportedFormat(ExportError):
    """The format keyword is unknown, or this platform cannot export."""

    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(f"Unsupported export format: {keyword}")


class SubcommandNotSupported(ExportError):
    """The export subcommand is not available on this platform."""

    def __init__(self, invocation: str):
        self.invocation = invocation
        super().__init__(f"Subcommand `{invocation}' not supported on this operating system")


class MalformedIdentifier(ExportError):
    """A package identifier string could not be parsed."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Invalid package identifier: {value!r}. "
            "A valid identifier is in the form origin/name (example: acme/redis)"
        )


class PackageNotFound(ExportError):
    """No local installation matches the identifier."""

    def __init__(self, ident: object):
        self.ident = ident
        super().__init__(f"Cannot find package: {ident}")


class ExecCommandNotFound(ExportError):
    """The helper command is not provided by the installed helper package."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"`{command}' was not found in the helper package")


class InstallError(ExportError):
    """The installer collaborator failed to provision a package."""
