"""Welcome mail delivery through fastapi-mail.

Sending is best effort: ``send_welcome`` logs failures and never raises, so
it can run as a background task after the response is sent.
"""

import html
import logging
from typing import Optional

from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType

from app.config import Settings

logger = logging.getLogger("cookbook.mail")

WELCOME_SUBJECT = "Welcome from My Cookbook's Team"
WELCOME_BODY = (
    "<h1>Hey {name}, welcome on board!</h1>"
    '<h3>Access the page now => <a href="{url}">Link</a></h3>'
    "<p>You may search for recipe, add to your meal planner and share recipes with friends!</p>"
)


class WelcomeMailer:
    def __init__(self, settings: Settings, mailer: Optional[FastMail] = None):
        self.enabled = settings.mail_enabled
        self.app_url = settings.app_url
        self.mailer = mailer
        if self.mailer is None and self.enabled:
            self.mailer = FastMail(
                ConnectionConfig(
                    MAIL_USERNAME=settings.mail_username,
                    MAIL_PASSWORD=settings.mail_password,
                    MAIL_FROM=settings.mail_from,
                    MAIL_PORT=settings.mail_port,
                    MAIL_SERVER=settings.mail_server,
                    MAIL_STARTTLS=settings.mail_starttls,
                    MAIL_SSL_TLS=settings.mail_ssl_tls,
                    USE_CREDENTIALS=bool(settings.mail_username),
                )
            )

    def build_message(self, email: str, name: str) -> MessageSchema:
        body = WELCOME_BODY.format(name=html.escape(name), url=html.escape(self.app_url))
        return MessageSchema(
            subject=WELCOME_SUBJECT,
            recipients=[email],
            body=body,
            subtype=MessageType.html,
        )

    async def send_welcome(self, email: str, name: str) -> bool:
        """Send the welcome mail; returns whether it was handed to the relay"""
        if not self.enabled or self.mailer is None:
            logger.info("Mail disabled, skipping welcome mail to %s", email)
            return False
        try:
            await self.mailer.send_message(self.build_message(email, name))
        except Exception as e:
            logger.error("Welcome mail to %s failed: %s", email, e)
            return False
        logger.info("Welcome mail sent to %s", email)
        return True
