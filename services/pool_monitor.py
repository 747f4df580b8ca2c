"""
Pool Monitor

Runs one scrape-persist-notify cycle: make sure the table exists, fetch the
current pool usage, store it and report it to Telegram.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from config.database import (
    create_db_engine,
    get_session_factory,
    init_database,
    record_usage,
)
from monitoring.pool_scraper import fetch_pool_usage
from services.telegram_service import format_usage_message, send_telegram_message
from utils.exceptions import (
    ConfigError,
    FetchError,
    NotifyError,
    ParseError,
    PoolMonitorError,
    ReadError,
    StorageError,
)

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of a single monitoring cycle."""

    storage_ready: bool = False
    usage: Optional[int] = None
    reading_id: Optional[int] = None
    notified: bool = False
    errors: List[PoolMonitorError] = field(default_factory=list)

    @property
    def ok(self):
        return not self.errors


def run_once(settings, notify=True, http_session=None):
    """
    Run the pipeline once.

    Every stage failure is logged and recorded on the result; later stages
    still run when they have what they need. A failed fetch ends the run.

    Args:
        settings (Settings): Validated settings
        notify (bool): Send the Telegram report
        http_session (requests.Session, optional): Session for outbound HTTP

    Returns:
        RunResult: What each stage produced

    Raises:
        ConfigError: If notify is set but Telegram credentials are missing
    """
    if notify and not settings.telegram_configured:
        raise ConfigError("TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID must be set to send notifications")

    result = RunResult()
    engine = None

    try:
        try:
            engine = create_db_engine(settings.database_url)
            init_database(engine)
            result.storage_ready = True
        except StorageError as e:
            logger.error(f"Error initializing the database: {e}")
            result.errors.append(e)

        try:
            usage = fetch_pool_usage(
                settings.pool_usage_url,
                timeout=settings.request_timeout,
                session=http_session,
            )
        except (FetchError, ReadError, ParseError) as e:
            logger.error(f"Error fetching pool usage: {e}")
            result.errors.append(e)
            return result

        result.usage = usage
        logger.info(f"Current swimming pool usage: {usage}%")

        if result.storage_ready:
            try:
                result.reading_id = record_usage(get_session_factory(engine), usage)
                logger.info("Data successfully saved to the database.")
            except StorageError as e:
                logger.error(f"Error saving to database: {e}")
                result.errors.append(e)
        else:
            logger.warning("Skipping database save: storage is not initialized")

        if notify:
            try:
                send_telegram_message(
                    settings.telegram_bot_token,
                    settings.telegram_chat_id,
                    format_usage_message(usage),
                    api_base=settings.telegram_api_base,
                    timeout=settings.request_timeout,
                    session=http_session,
                )
                result.notified = True
                logger.info("Message successfully sent to Telegram.")
            except NotifyError as e:
                logger.error(f"Error sending message to Telegram: {e}")
                result.errors.append(e)

        return result
    finally:
        if engine is not None:
            engine.dispose()
