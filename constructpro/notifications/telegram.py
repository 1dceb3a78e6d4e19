"""Telegram notification service: sends new inquiry cards to the site owner."""

from __future__ import annotations

from html import escape

import structlog
from aiogram import Bot

from constructpro.config import settings
from constructpro.landing.content import PROJECT_TYPES
from constructpro.models.contact_inquiry import ContactInquiry

logger = structlog.get_logger()

INQUIRY_TEMPLATE = """📬 <b>New inquiry!</b>

👤 <b>Name:</b> {name}
✉️ <b>Email:</b> {email}
📞 <b>Phone:</b> {phone}
🏗 <b>Project type:</b> {service_type}

<b>{subject}</b>
{message}"""

PROJECT_TYPE_NAMES = dict(PROJECT_TYPES)


def format_inquiry(inquiry: ContactInquiry) -> str:
    """Render the owner notification text (Telegram HTML parse mode)."""
    service_type = inquiry.service_type or ""
    return INQUIRY_TEMPLATE.format(
        name=escape(inquiry.name),
        email=escape(inquiry.email),
        phone=escape(inquiry.phone or "Not provided"),
        service_type=escape(PROJECT_TYPE_NAMES.get(service_type, service_type) or "Not specified"),
        subject=escape(inquiry.subject),
        message=escape(inquiry.message),
    )


def notifications_enabled() -> bool:
    return bool(
        settings.inquiry_notify_telegram_bot_token
        and settings.inquiry_notify_telegram_chat_id
    )


async def notify_new_inquiry(inquiry: ContactInquiry) -> bool:
    """Send a new inquiry card to the owner chat.

    Returns:
        True if sent; False when disabled or on failure (never raises)
    """
    if not notifications_enabled():
        return False

    bot = None
    try:
        bot = Bot(token=settings.inquiry_notify_telegram_bot_token)
        await bot.send_message(
            chat_id=int(settings.inquiry_notify_telegram_chat_id),
            text=format_inquiry(inquiry),
            parse_mode="HTML",
        )
        logger.info(
            "inquiry_notification_sent",
            inquiry_id=str(inquiry.id),
            chat_id=settings.inquiry_notify_telegram_chat_id,
        )
        return True
    except Exception as e:
        logger.error("inquiry_notification_failed", inquiry_id=str(inquiry.id), error=str(e))
        return False
    finally:
        if bot is not None:
            await bot.session.close()
