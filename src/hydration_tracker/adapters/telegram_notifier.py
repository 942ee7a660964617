"""Notifier adapters for reminder delivery."""

import logging
from dataclasses import dataclass

import httpx

from hydration_tracker.services.reminders import Notifier

logger = logging.getLogger(__name__)


@dataclass
class HttpxTelegramNotifier(Notifier):
    """Sends notifications to a Telegram chat with httpx."""

    bot_token: str
    chat_id: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, bot_token: str, chat_id: str) -> "HttpxTelegramNotifier":
        """Create a notifier with a managed httpx session."""
        return cls(
            bot_token=bot_token, chat_id=chat_id, http_client=httpx.AsyncClient()
        )

    async def notify(self, title: str, body: str) -> None:
        """Send the notification using Telegram's sendMessage API."""
        url = f"https://api.telegram.org/bot{self.bot_token}/sendMessage"
        payload: dict[str, object] = {
            "chat_id": self.chat_id,
            "text": f"{title}\n{body}",
        }
        response = await self.http_client.post(url, json=payload, timeout=10)
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()


@dataclass
class LoggingNotifier(Notifier):
    """Notifier that only logs, used when no chat is configured."""

    async def notify(self, title: str, body: str) -> None:
        """Log the notification."""
        logger.info("%s: %s", title, body)

    async def close(self) -> None:
        """Nothing to release."""
