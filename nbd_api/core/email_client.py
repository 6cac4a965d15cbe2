# ============================================================================
# FILE: nbd_api/core/email_client.py
# Outbound email through the Resend HTTP API
# ============================================================================
import html
from typing import Dict
import httpx
from nbd_api.config import settings
import logging

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """Raised when the email provider rejects or fails a send"""


class EmailClient:
    """
    Thin Resend client.
    When RESEND_API_KEY or FROM_EMAIL is not configured, sends are skipped
    and logged instead.
    """

    def __init__(self):
        self.api_url = settings.RESEND_API_URL

    @property
    def is_configured(self) -> bool:
        return bool(settings.RESEND_API_KEY and settings.FROM_EMAIL)

    def send_email(self, to: str, subject: str, html_body: str) -> bool:
        """
        Send an email.

        Returns:
            True if the provider accepted it, False if email is not configured

        Raises:
            EmailDeliveryError: transport failure or provider error response
        """
        if not self.is_configured:
            logger.warning(f"Email not configured; skipping '{subject}' to {to}")
            return False

        payload = {
            "from": settings.FROM_EMAIL,
            "to": [to],
            "subject": subject,
            "html": html_body,
        }
        headers = {"Authorization": f"Bearer {settings.RESEND_API_KEY}"}

        try:
            with httpx.Client(timeout=settings.EMAIL_TIMEOUT_SECONDS) as client:
                response = client.post(self.api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"Email transport error: {e}") from e

        if response.status_code >= 400:
            raise EmailDeliveryError(
                f"Email provider returned {response.status_code}: {response.text}"
            )

        message_id = response.json().get("id")
        logger.info(f"Email sent to {to} (id: {message_id})")
        return True


def create_password_reset_email(reset_url: str, user_email: str) -> Dict[str, str]:
    """Build subject and HTML body for a password reset email"""
    safe_url = html.escape(reset_url, quote=True)
    safe_email = html.escape(user_email)
    body = f"""<!DOCTYPE html>
<html>
  <head><meta charset="utf-8"><title>Reset Your Password</title></head>
  <body style="font-family: 'Courier New', monospace; font-size: 12px;">
    <div style="border: 2px solid #000; padding: 15px; max-width: 600px;">
      <h1 style="margin: 0; font-size: 16px;">nbd</h1>
      <p><strong>Password Reset Request</strong></p>
      <p>Account: {safe_email}</p>
      <p>Someone requested a password reset for your account. If this was you, click the link below:</p>
      <p><a href="{safe_url}">{safe_url}</a></p>
      <p>This link expires in 1 hour.</p>
      <p>If you didn't request this, ignore this email.</p>
    </div>
  </body>
</html>
"""
    return {"subject": "Reset Your Password - nbd", "html": body}

# Singleton instance
email_client = EmailClient()
