"""Dashboard endpoints: overview document and chart primitives."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..security import require_user
from ..services import DashboardService

router = APIRouter(dependencies=[Depends(require_user)])


@router.get("/overview", response_model=schemas.DashboardOverview)
def dashboard_overview(db: Session = Depends(get_db)) -> schemas.DashboardOverview:
    """Return the summary cards and chart series shown on the dashboard."""

    return schemas.DashboardOverview.model_validate(DashboardService.overview(db))


@router.get("/charts/{chart}", response_model=schemas.ChartRender)
def render_dashboard_chart(
    chart: schemas.ChartName,
    width: float = Query(400, gt=0, le=4000),
    height: float = Query(300, gt=0, le=4000),
    db: Session = Depends(get_db),
) -> schemas.ChartRender:
    """Return the draw primitives for one dashboard chart."""

    return schemas.ChartRender.model_validate(
        DashboardService.render(db, chart, width=width, height=height)
    )
