"""Upstream adapters for deckcache."""

from deckcache.adapters.base import ExternalSourceAdapter
from deckcache.adapters.blogger import ReportsSummaryAdapter
from deckcache.adapters.fxrates import FxRatesAdapter
from deckcache.adapters.github import (
    AuthorReportCountAdapter,
    AuthorReportsAdapter,
    GameReportTemplateAdapter,
    HardwareInfoAdapter,
    IssueLabelsAdapter,
    PopularReportsAdapter,
    ProjectDetailsAdapter,
    RecentReportsAdapter,
    ReportBodySchemaAdapter,
    ReportSearchAdapter,
)
from deckcache.adapters.itad import ItadLookupAdapter, ItadPricesAdapter
from deckcache.adapters.protondb import ProtonDbSummaryAdapter
from deckcache.adapters.sdhq import SdhqReviewsAdapter
from deckcache.adapters.steam import (
    SteamAppDetailsAdapter,
    SteamCompatibilityAdapter,
    SteamSuggestionsAdapter,
)

__all__ = [
    "ExternalSourceAdapter",
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
    "SteamAppDetailsAdapter",
    "SteamCompatibilityAdapter",
    "SteamSuggestionsAdapter",
    "ProtonDbSummaryAdapter",
    "ItadLookupAdapter",
    "ItadPricesAdapter",
    "SdhqReviewsAdapter",
    "FxRatesAdapter",
    "ReportsSummaryAdapter",
]
