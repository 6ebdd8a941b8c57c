"""Analytics repository that writes events to the application log."""

import json
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass
class LoggingAnalyticsRepository:
    """Emit each analytics event as a single JSON log line."""

    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("body_journey.analytics")
    )

    def create_event(self, event_type: str, payload: dict[str, object]) -> None:
        record = {
            "event_type": event_type,
            "created_at": datetime.now(tz=UTC).isoformat(),
            **payload,
        }
        self.logger.info(json.dumps(record, sort_keys=True))
