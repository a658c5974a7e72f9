"""Exception hierarchy for the codebase analysis engine."""


class AnalysisError(Exception):
    """The analysis could not produce a report.

    Raised by ``analyze_codebase`` with a human-readable message; the
    underlying failure is chained as ``__cause__``.
    """


class PathNotFoundError(AnalysisError):
    """The resolved project root does not exist."""


class WalkError(AnalysisError):
    """Listing or stat-ing an entry failed during traversal."""


class ManifestParseError(AnalysisError):
    """The dependency manifest is not valid structured data.

    Never escapes the manifest analyzer, which degrades to an empty
    dependency/framework result instead.
    """
