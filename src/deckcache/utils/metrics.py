"""Metric emission through the logging pipeline.

Metrics are plain INFO records on the ``deckcache.metrics`` logger. The
structured payload rides along in ``record.metric`` so a JSON formatter
or log shipper can pick it up without parsing the message.
"""

import logging
from datetime import datetime, timezone
from typing import Any

metrics_logger = logging.getLogger("deckcache.metrics")

SOURCE_PROJECT = "deckcache"


def log_metric(name: str, value: Any, **fields: Any) -> dict[str, Any]:
    """Emit a metric record.

    Args:
        name: Metric name.
        value: Metric value.
        **fields: Additional context attached to the record.

    Returns:
        The structured payload that was logged.
    """
    payload: dict[str, Any] = {
        "log_type": "METRIC",
        "source_project": SOURCE_PROJECT,
        "metric_name": name,
        "metric_value": value,
        "metric_timestamp": datetime.now(timezone.utc).isoformat(),
        **fields,
    }
    metrics_logger.info("metric %s=%s", name, value, extra={"metric": payload})
    return payload
