from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .api.connection import ApiConfig, ApiConnection
from .attendance.http_summary_repository import HttpSummaryRepository
from .attendance.repository import SummaryRepository
from .attendance.service import DashboardService


@dataclass(frozen=True)
class Container:
    conn: Optional[ApiConnection]

    summary_repo: SummaryRepository

    dashboard_service: DashboardService


def build_container(
    *,
    api_config: dict,
    employees: Sequence[str] = (),
    departments: Sequence[str] = (),
    summary_repo: Optional[SummaryRepository] = None,
) -> Container:
    conn = None
    if summary_repo is None:
        config = ApiConfig(
            base_url=str(api_config.get("base_url") or ""),
            timeout=float(api_config.get("timeout", 20)),
        )
        conn = ApiConnection.get_instance(config)
        summary_repo = HttpSummaryRepository(conn)

    dashboard_service = DashboardService(summary_repo, employees=employees, departments=departments)

    return Container(
        conn=conn,
        summary_repo=summary_repo,
        dashboard_service=dashboard_service,
    )
