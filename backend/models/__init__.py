from models.metric import DateRange, MetricProfile

__all__ = ["MetricProfile", "DateRange"]
