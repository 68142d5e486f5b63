class InvalidPatternError(ValueError):
    """Keyword filter built from an empty set or an empty keyword."""


class RootResolutionWarning(UserWarning):
    """A domain has no registrable root under the public suffix list."""


class SourceAggregationError(RuntimeError):
    """A remote or local source could not be fetched or read."""

    def __init__(self, source, reason):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason
