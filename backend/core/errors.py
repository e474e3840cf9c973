"""
Request-scoped errors. Each one maps to a 400 at the HTTP boundary.
"""


class MetricsError(Exception):
    """Base class for client errors raised while serving a series."""


class UnknownMetric(MetricsError):
    def __init__(self, metric_id: str) -> None:
        super().__init__("unknown metric")
        self.metric_id = metric_id


class InvalidDate(MetricsError):
    def __init__(self, param: str, value: str | None) -> None:
        super().__init__(f"invalid `{param}` date")
        self.param = param
        self.value = value


class InvertedRange(MetricsError):
    def __init__(self, start, end) -> None:
        super().__init__("`from` date is after `to` date")
        self.start = start
        self.end = end
