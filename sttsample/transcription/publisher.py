"""Report publisher module for pub/sub event publishing."""

import logging
from pubsub import pub

from ..models.report import TranscriptionReport

logger = logging.getLogger(__name__)


class ReportPublisher:
    """Publishes recognizer outcomes using pubsub.pub."""

    def __init__(self, topic: str = "recognizer"):
        """Initialize report publisher.

        Args:
            topic: Pub/sub topic root; reports go to "<topic>.report", errors to "<topic>.error"
        """
        self.topic = topic
        self.report_topic = f"{topic}.report"
        self.error_topic = f"{topic}.error"
        logger.info(f"ReportPublisher initialized with topic: {topic}")

    def publish_report(self, report: TranscriptionReport) -> None:
        pub.sendMessage(self.report_topic, report=report)
        logger.debug(f"Published report: {len(report.sentences)} sentences, {report.response_time:.3f}s")

    def publish_error(self, error: Exception) -> None:
        pub.sendMessage(self.error_topic, error=error)
        logger.debug(f"Published recognition error: {error}")
