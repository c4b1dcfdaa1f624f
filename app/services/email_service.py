"""
Email Service - transactional email over SMTP.
Returns an EmailResult instead of raising so routes can report the failure.
"""
import logging
import smtplib
from dataclasses import dataclass
from email.mime.application import MIMEApplication
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import make_msgid
from typing import Optional, Sequence, Tuple

from app.core.config import Settings, settings

logger = logging.getLogger(__name__)

# (filename, content, mime subtype) e.g. ("receipt.pdf", b"...", "pdf")
Attachment = Tuple[str, bytes, str]


@dataclass
class EmailResult:
    success: bool
    id: Optional[str] = None
    error: Optional[str] = None


class SmtpEmailSender:
    """Dispatch emails through the configured SMTP server."""

    def __init__(self, config: Settings = settings):
        self.config = config

    def send(
        self,
        to: str,
        subject: str,
        html: str,
        text: str = "",
        attachments: Sequence[Attachment] = (),
    ) -> EmailResult:
        if not self.config.email_configured:
            logger.warning(f"[EMAIL] SMTP not configured. Would send to '{to}': {subject}")
            return EmailResult(success=False, error="Email service not configured")

        message_id = make_msgid()
        msg = MIMEMultipart("mixed")
        msg["Subject"] = subject
        msg["From"] = self.config.EMAIL_FROM
        msg["To"] = to
        msg["Reply-To"] = self.config.EMAIL_REPLY_TO
        msg["Message-ID"] = message_id

        body = MIMEMultipart("alternative")
        if text:
            body.attach(MIMEText(text, "plain"))
        body.attach(MIMEText(html, "html"))
        msg.attach(body)

        for filename, content, subtype in attachments:
            part = MIMEApplication(content, _subtype=subtype)
            part.add_header("Content-Disposition", "attachment", filename=filename)
            msg.attach(part)

        try:
            with smtplib.SMTP(self.config.SMTP_SERVER, self.config.SMTP_PORT, timeout=10) as srv:
                srv.ehlo()
                srv.starttls()
                srv.login(self.config.SMTP_USER, self.config.SMTP_PASSWORD)
                srv.sendmail(self.config.EMAIL_FROM, [to], msg.as_string())
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(f"[EMAIL] Failed sending to '{to}': {exc}")
            return EmailResult(success=False, error=str(exc) or "Failed to send email")

        logger.info(f"[EMAIL] Sent to '{to}': {subject}")
        return EmailResult(success=True, id=message_id)


def get_email_sender() -> SmtpEmailSender:
    """Dependency for the outbound email collaborator."""
    return SmtpEmailSender()
