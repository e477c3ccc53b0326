"""
Async email sender using aiosmtplib with STARTTLS.

Reads EMAIL_HOST, EMAIL_PORT, EMAIL_USERNAME, EMAIL_PASSWORD and EMAIL_FROM
from environment via Settings. If EMAIL_HOST is not configured, send_email()
logs a warning and returns False without raising.
"""
import logging
from email.mime.text import MIMEText

import aiosmtplib

from verdant.core.config import settings

logger = logging.getLogger(__name__)


async def send_email(recipient: str, subject: str, body: str) -> bool:
    if not settings.EMAIL_HOST:
        logger.warning("email: EMAIL_HOST not configured, skipping send")
        return False

    msg = MIMEText(body, "plain")
    msg["Subject"] = subject
    msg["From"] = settings.EMAIL_FROM
    msg["To"] = recipient

    try:
        await aiosmtplib.send(
            msg,
            hostname=settings.EMAIL_HOST,
            port=settings.EMAIL_PORT,
            username=settings.EMAIL_USERNAME or None,
            password=settings.EMAIL_PASSWORD or None,
            start_tls=True,
        )
        logger.info("email: sent '%s' to %s", subject, recipient)
        return True
    except Exception as exc:
        logger.exception("email: failed to send '%s': %s", subject, exc)
        return False
