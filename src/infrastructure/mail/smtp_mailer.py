"""
SMTP mail relay client.

Wraps the blocking smtplib client in a worker thread so sends never
stall the event loop.
"""

import asyncio
import smtplib
import ssl
from email.message import EmailMessage

from src.config import get_logger
from src.core.exceptions import DeliveryError
from src.core.interfaces.mailer import IMailer

logger = get_logger(__name__)


class SMTPMailer(IMailer):
    """
    Plaintext mail delivery through an SMTP relay.

    With ``secure`` the connection uses implicit TLS (port 465 style);
    otherwise STARTTLS is negotiated whenever the server offers it.
    """

    def __init__(
        self,
        host: str,
        port: int = 587,
        secure: bool = False,
        user: str = "",
        password: str = "",
        sender: str = "",
    ):
        self.host = host
        self.port = port
        self.secure = secure
        self.user = user
        self.password = password
        self.sender = sender or user

    @classmethod
    def from_settings(cls) -> "SMTPMailer":
        """Build a mailer from the SMTP_* settings."""
        from src.config import get_settings

        mail = get_settings().mail
        return cls(
            host=mail.host,
            port=mail.port,
            secure=mail.secure,
            user=mail.user,
            password=mail.password,
            sender=mail.sender,
        )

    def build_message(self, to: str, subject: str, body: str) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = self.sender
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content(body)
        return msg

    async def send(self, to: str, subject: str, body: str) -> None:
        """Deliver one message; relay errors surface as DeliveryError."""
        if not self.host:
            raise DeliveryError(to, "SMTP host not configured")

        msg = self.build_message(to, subject, body)
        try:
            await asyncio.to_thread(self._send_sync, msg)
        except (smtplib.SMTPException, OSError) as e:
            raise DeliveryError(to, str(e) or e.__class__.__name__) from e

        logger.debug("smtp_message_sent", host=self.host, to=to)

    def _send_sync(self, msg: EmailMessage) -> None:
        context = ssl.create_default_context()
        if self.secure:
            server: smtplib.SMTP = smtplib.SMTP_SSL(self.host, self.port, context=context)
        else:
            server = smtplib.SMTP(self.host, self.port)

        with server:
            server.ehlo()
            if not self.secure and server.has_extn("starttls"):
                server.starttls(context=context)
                server.ehlo()
            if self.user:
                server.login(self.user, self.password)
            server.send_message(msg)
