from schemas.metrics import DataPoint, MetricOut

__all__ = [
    "DataPoint",
    "MetricOut",
]
