"""
Telegram Service

Sends pool usage reports through the Telegram Bot API.
"""

import logging

import requests

from config.settings import DEFAULT_TELEGRAM_API_BASE
from utils.exceptions import NotifyError

logger = logging.getLogger(__name__)

SEND_MESSAGE_PATH = "/bot{token}/sendMessage"


def format_usage_message(percentage):
    """Build the report text for a usage percentage."""
    return f"Current swimming pool usage is {percentage}%"


def build_send_message_url(bot_token, api_base=DEFAULT_TELEGRAM_API_BASE):
    return api_base.rstrip("/") + SEND_MESSAGE_PATH.format(token=bot_token)


def send_telegram_message(bot_token, chat_id, message, api_base=DEFAULT_TELEGRAM_API_BASE,
                          timeout=None, session=None):
    """
    Send a text message to a Telegram chat.

    Args:
        bot_token (str): Bot API token
        chat_id (str): Destination chat or channel ID
        message (str): Message text
        api_base (str, optional): Bot API base URL
        timeout (float, optional): Request timeout in seconds
        session (requests.Session, optional): Session to issue the request with

    Raises:
        NotifyError: If the request fails or Telegram does not answer 200 OK
    """
    http = session or requests
    url = build_send_message_url(bot_token, api_base)

    try:
        # data= sends application/x-www-form-urlencoded
        response = http.post(
            url,
            data={"chat_id": chat_id, "text": message},
            timeout=timeout,
        )
    except requests.RequestException as e:
        # str(e) would include the URL and with it the bot token
        raise NotifyError(f"failed to send message: {type(e).__name__}") from e

    try:
        body = response.text
    except requests.RequestException as e:
        raise NotifyError(f"failed to read response: {e}") from e

    if response.status_code != requests.codes.ok:
        raise NotifyError(
            f"telegram API responded with status {response.status_code}: {body}",
            status_code=response.status_code,
            response_body=body,
        )

    logger.info(f"Message delivered to Telegram chat {chat_id}")
