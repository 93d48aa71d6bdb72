"""Adapters for the game reports repository on GitHub."""

from deckcache.adapters.github.common import GitHubAdapter
from deckcache.adapters.github.projects import ProjectDetailsAdapter
from deckcache.adapters.github.reference import (
    GameReportTemplateAdapter,
    HardwareInfoAdapter,
    IssueLabelsAdapter,
    ReportBodySchemaAdapter,
)
from deckcache.adapters.github.reports import (
    AuthorReportCountAdapter,
    AuthorReportsAdapter,
    PopularReportsAdapter,
    RecentReportsAdapter,
    ReportSearchAdapter,
)

__all__ = [
    "GitHubAdapter",
    "RecentReportsAdapter",
    "PopularReportsAdapter",
    "ReportSearchAdapter",
    "AuthorReportsAdapter",
    "AuthorReportCountAdapter",
    "ProjectDetailsAdapter",
    "IssueLabelsAdapter",
    "HardwareInfoAdapter",
    "ReportBodySchemaAdapter",
    "GameReportTemplateAdapter",
]
