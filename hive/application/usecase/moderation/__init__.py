"""Moderation use cases."""

from .apply_action import ApplyActionRequest, ApplyActionUseCase
from .common import ReportResponse
from .list_reports import (
    GetReportRequest,
    GetReportUseCase,
    ListReportsRequest,
    ListReportsUseCase,
)
from .submit_report import (
    DUPLICATE_REPORT_MESSAGE,
    SubmitReportRequest,
    SubmitReportResponse,
    SubmitReportUseCase,
)

__all__ = [
    "DUPLICATE_REPORT_MESSAGE",
    "ApplyActionRequest",
    "ApplyActionUseCase",
    "GetReportRequest",
    "GetReportUseCase",
    "ListReportsRequest",
    "ListReportsUseCase",
    "ReportResponse",
    "SubmitReportRequest",
    "SubmitReportResponse",
    "SubmitReportUseCase",
]
