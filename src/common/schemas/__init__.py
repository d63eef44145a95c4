from .report import SourceSettings, ReportSettings

__all__ = [
    "SourceSettings",
    "ReportSettings",
]
