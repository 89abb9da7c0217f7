"""Exceptions raised by the analysis core."""


class CovidDashboardError(Exception):
    """Base class for errors raised by covid_dashboard."""


class LoadError(CovidDashboardError):
    """The input source could not be opened or read."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not load {source}: {reason}")
