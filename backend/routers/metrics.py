import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from core.deps import get_registry
from core.errors import MetricsError
from core.registry import MetricRegistry
from schemas.metrics import DataPoint, MetricOut
from services.date_range import parse_date_range
from services.series import generate_series

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[MetricOut])
def list_metrics(registry: MetricRegistry = Depends(get_registry)):
    return [
        MetricOut(id=metric_id, baseline=profile.baseline, spread=profile.spread)
        for metric_id, profile in sorted(registry.items())
    ]


@router.get("/{metric}", response_model=list[DataPoint])
def get_metric_series(
    metric: str,
    from_: str | None = Query(None, alias="from", description="Start date (YYYY-MM-DD)"),
    to: str | None = Query(None, description="End date (YYYY-MM-DD)"),
    registry: MetricRegistry = Depends(get_registry),
):
    try:
        profile = registry.lookup(metric)
        date_range = parse_date_range(from_, to)
    except MetricsError as exc:
        logger.warning("Rejected %s?from=%s&to=%s: %s", metric, from_, to, exc)
        raise HTTPException(400, detail=str(exc))
    series = generate_series(metric, profile, date_range)
    logger.debug("Generated %d points for %s", len(series), metric)
    return series
