"""
Background view reporter.

Reports go through a single worker so they are initiated in submission
order: a teardown report always starts after earlier periodic reports.
Failures are logged and never reach the user.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor

from legal_clinic.api.resources import BlogAPI
from legal_clinic.exceptions import ApiError

logger = logging.getLogger(__name__)


class BackgroundViewReporter:
    def __init__(self, blog_api: BlogAPI, executor: ThreadPoolExecutor | None = None) -> None:
        self.blog_api = blog_api
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="view-reporter"
        )

    def report_view(self, content_id: str, time_spent: int | None = None) -> Future[None]:
        return self._executor.submit(self._send, content_id, time_spent)

    def _send(self, content_id: str, time_spent: int | None) -> None:
        try:
            self.blog_api.track_view(content_id, time_spent)
        except ApiError as exc:
            logger.warning(
                "Failed to report view of %s (timeSpent=%s): %s", content_id, time_spent, exc
            )

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
