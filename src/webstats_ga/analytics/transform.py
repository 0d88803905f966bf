"""Reshape a reports:batchGet response into a Webstats statistic payload."""
import copy
from typing import Any

from pydantic import ValidationError

from ..exceptions import FormatError
from ..schemas.report import DateWindow, ReportResponse


PAYLOAD_VERSION = "1"
ROW_DIMENSION = "day"


def annotate_row(row: dict, window: DateWindow) -> dict:
    """Add the window and granularity fields to a single report row."""
    row["startDateTime"] = window.start_timestamp
    row["endDateTime"] = window.end_timestamp
    row["createdAt"] = window.start_timestamp
    row["dimension"] = ROW_DIMENSION
    return row


def transform_report(raw: Any, window: DateWindow) -> dict:
    """Version the response and annotate every row of ``reports[0]``.

    The input is left untouched; row order is preserved.

    Raises:
        FormatError: If ``reports[0].data.rows`` is missing or malformed
    """
    try:
        response = ReportResponse.model_validate(raw)
    except ValidationError as exc:
        raise FormatError("Incorrect format") from exc

    if response.first_report_rows is None:
        raise FormatError("Incorrect format")

    data = copy.deepcopy(raw)
    data["version"] = PAYLOAD_VERSION

    for row in data["reports"][0]["data"]["rows"]:
        annotate_row(row, window)

    return data
