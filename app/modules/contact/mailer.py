"""SMTP notification for new contact form messages."""
import logging
import smtplib
from email.message import EmailMessage
from html import escape
from typing import Optional

from app.config import settings
from app.modules.contact.schemas import ContactCreate

logger = logging.getLogger(__name__)


def header_value(value: str) -> str:
    """Collapse line breaks so user text cannot add or break mail headers"""
    return " ".join(value.splitlines()).strip()


def render_notification(contact: ContactCreate) -> str:
    """HTML body for the owner's inbox. All user text is escaped."""
    message_html = escape(contact.message).replace("\n", "<br>")
    return (
        "<h2>New Contact Form Submission</h2>"
        f"<p><strong>Name:</strong> {escape(contact.name)}</p>"
        f"<p><strong>Email:</strong> {escape(str(contact.email))}</p>"
        f"<p><strong>Subject:</strong> {escape(contact.subject)}</p>"
        f"<p><strong>Phone:</strong> {escape(contact.phone or 'Not provided')}</p>"
        "<p><strong>Message:</strong></p>"
        f"<p>{message_html}</p>"
        "<hr>"
        "<p><em>Sent from your portfolio website</em></p>"
    )


class Mailer:
    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: Optional[bool] = None,
    ):
        self.host = host or settings.smtp_host
        self.port = port or settings.smtp_port
        self.username = username or settings.smtp_user
        self.password = password or settings.smtp_pass
        self.use_tls = settings.smtp_use_tls if use_tls is None else use_tls

    def build_message(self, contact: ContactCreate) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = header_value(f"New Contact Form Message from {contact.name}: {contact.subject}")
        msg["From"] = settings.email_from or self.username or settings.email_to
        msg["To"] = settings.email_to
        msg["Reply-To"] = header_value(str(contact.email))
        msg.set_content(
            f"Name: {contact.name}\nEmail: {contact.email}\nSubject: {contact.subject}\n"
            f"Phone: {contact.phone or 'Not provided'}\n\n{contact.message}\n"
        )
        msg.add_alternative(render_notification(contact), subtype="html")
        return msg

    def send(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=10) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.username and self.password:
                smtp.login(self.username, self.password)
            smtp.send_message(msg)

    def notify_new_message(self, contact: ContactCreate) -> bool:
        """Send the owner notification. Failures are logged, never raised."""
        if not settings.smtp_configured:
            logger.warning("SMTP not configured; skipping contact notification")
            return False
        try:
            msg = self.build_message(contact)
        except Exception:
            logger.exception("Could not build contact notification for %s", contact.email)
            return False

        try:
            self.send(msg)
            logger.info("Contact notification sent for message from %s", contact.email)
            return True
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Email error: {e}")
            return False


def get_mailer() -> Mailer:
    return Mailer()
