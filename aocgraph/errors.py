from __future__ import annotations


class ChartError(Exception):
    """Base class for every error raised by the chart engine."""


class ConfigurationError(ChartError, ValueError):
    """Bad theme, unknown chart type or an unusable canvas."""


# Name used by theme documents
ConfigError = ConfigurationError


class DataShapeError(ChartError, ValueError):
    """Series or record that cannot be rendered."""


class FetchError(ChartError, RuntimeError):
    """Leaderboard could not be retrieved (network, HTTP status, session)."""


class ParseError(ChartError, ValueError):
    """Leaderboard payload does not have the expected structure."""


class FontLoadError(ChartError, OSError):
    """Font resource is missing or malformed."""
