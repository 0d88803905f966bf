"""Pydantic models for the Analytics Reporting v4 request/response cycle."""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


ANALYTICS_READONLY_SCOPE = "https://www.googleapis.com/auth/analytics.readonly"

REPORT_METRICS = (
    "ga:pageviews",
    "ga:users",
    "ga:sessions",
    "ga:sessionDuration",
    "ga:bounceRate",
)
REPORT_DIMENSIONS = ("ga:pagePath",)


class Credentials(BaseModel):
    """Service account identity used to sign the JWT assertion."""

    model_config = ConfigDict(frozen=True)

    service_account_email: str
    private_key: str = Field(..., repr=False)
    scope: str = ANALYTICS_READONLY_SCOPE

    @field_validator("private_key")
    @classmethod
    def _normalize_newlines(cls, value: str) -> str:
        # Keys pasted into env vars usually carry literal "\n" sequences
        return value.replace("\\n", "\n")

    def to_service_account_info(self, token_uri: str) -> dict:
        """Build the mapping google-auth expects for a service account."""
        return {
            "client_email": self.service_account_email,
            "private_key": self.private_key,
            "token_uri": token_uri,
        }


class DateWindow(BaseModel):
    """Reporting window; start and end are local wall-clock instants."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @property
    def start_date(self) -> str:
        return self.start.strftime("%Y-%m-%d")

    @property
    def end_date(self) -> str:
        return self.end.strftime("%Y-%m-%d")

    @property
    def start_timestamp(self) -> int:
        """Window start as integer epoch seconds."""
        return int(self.start.timestamp())

    @property
    def end_timestamp(self) -> int:
        """Window end as integer epoch seconds."""
        return int(self.end.timestamp())


class ReportDateRange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_date: str = Field(..., alias="startDate")
    end_date: str = Field(..., alias="endDate")


class ReportMetric(BaseModel):
    expression: str


class ReportDimension(BaseModel):
    name: str


class ReportRequest(BaseModel):
    """Single entry of a reports:batchGet body."""

    model_config = ConfigDict(populate_by_name=True)

    view_id: str = Field(..., alias="viewId")
    date_ranges: list[ReportDateRange] = Field(..., alias="dateRanges")
    metrics: list[ReportMetric] = Field(default_factory=list)
    dimensions: list[ReportDimension] = Field(default_factory=list)

    @classmethod
    def for_window(cls, view_id: str, window: DateWindow) -> "ReportRequest":
        """Build the page-level metrics request for one date window."""
        return cls(
            view_id=view_id,
            date_ranges=[
                ReportDateRange(
                    start_date=window.start_date, end_date=window.end_date
                )
            ],
            metrics=[ReportMetric(expression=m) for m in REPORT_METRICS],
            dimensions=[ReportDimension(name=d) for d in REPORT_DIMENSIONS],
        )

    def to_batch_body(self) -> dict:
        """Convert to the JSON body posted to reports:batchGet."""
        return {"reportRequests": [self.model_dump(by_alias=True)]}


class ReportData(BaseModel):
    """Report data block; only ``rows`` is inspected, rows stay opaque."""

    model_config = ConfigDict(extra="allow")

    rows: Optional[list[dict[str, Any]]] = None


class Report(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: Optional[ReportData] = None


class ReportResponse(BaseModel):
    """Top-level reports:batchGet response."""

    model_config = ConfigDict(extra="allow")

    reports: list[Report] = Field(default_factory=list)

    @property
    def first_report_rows(self) -> Optional[list[dict[str, Any]]]:
        """Rows of ``reports[0]``, or None when any level is missing."""
        if not self.reports:
            return None
        data = self.reports[0].data
        if data is None:
            return None
        return data.rows
