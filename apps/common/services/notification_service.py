"""
Points notification service (email and SMS).

Delivery is best-effort: every method logs failures and returns False rather
than raising. Ledger services schedule these calls with
``transaction.on_commit`` so a notification never runs for a rolled back
change and never rolls one back.
"""
import logging

import requests
from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.mail import send_mail
from django.utils.html import escape, strip_tags

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for sending points update notifications"""

    @staticmethod
    def send_email(user, subject, html_content):
        """Send an HTML email to the user. Returns True on success."""
        try:
            logger.debug(f"Attempting to send email to: {user.email}")
            send_mail(
                subject=subject,
                message=strip_tags(html_content),
                from_email=settings.DEFAULT_FROM_EMAIL,
                recipient_list=[user.email],
                html_message=html_content,
            )
            return True
        except Exception as e:
            logger.error(f"Error sending email to {user.email}: {e}", exc_info=True)
            return False

    @staticmethod
    def send_sms(user, message):
        """Send a transactional SMS through Brevo. Returns True on success."""
        if not settings.BREVO_API_KEY:
            logger.debug("BREVO_API_KEY is not set; skipping SMS")
            return False
        if not user.phone_number:
            return False

        try:
            response = requests.post(
                settings.BREVO_SMS_URL,
                headers={
                    'accept': 'application/json',
                    'api-key': settings.BREVO_API_KEY,
                    'content-type': 'application/json',
                },
                json={
                    'type': 'transactional',
                    'sender': settings.SMS_SENDER,
                    'recipient': user.phone_number,
                    'content': message,
                },
                timeout=settings.NOTIFICATION_TIMEOUT,
            )
            response.raise_for_status()
            return True
        except requests.RequestException as e:
            logger.error(f"Error sending SMS to user {user.pk}: {e}", exc_info=True)
            return False

    @staticmethod
    def points_updated(user_id, points, new_total, description):
        """Notify a user that their balance changed"""
        if not settings.LOYALTY['NOTIFICATIONS_ENABLED']:
            return False

        try:
            User = get_user_model()
            user = User.objects.filter(pk=user_id).first()
            if user is None:
                logger.warning(f"Points notification skipped; user {user_id} no longer exists")
                return False

            customer_name = user.get_full_name() or user.email
            email_sent = NotificationService.send_email(
                user,
                'Points Update Notification',
                generate_points_update_email(customer_name, points, new_total, description),
            )
            NotificationService.send_sms(
                user, generate_points_update_sms(points, new_total)
            )
            return email_sent
        except Exception as e:
            logger.error(f"Error notifying user {user_id} of points update: {e}", exc_info=True)
            return False


def generate_points_update_email(customer_name, points, new_total, description):
    label = 'Points Added' if points >= 0 else 'Points Deducted'
    customer_name = escape(customer_name)
    description = escape(description)
    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
      <h2>Points Update Notification</h2>
      <p>Hello {customer_name},</p>
      <p>Your points have been updated!</p>

      <div style="background-color: #f8f9fa; padding: 15px; border-radius: 5px; margin: 20px 0;">
        <p style="margin: 5px 0;"><strong>{label}:</strong> {abs(points):,}</p>
        <p style="margin: 5px 0;"><strong>New Total:</strong> {new_total:,}</p>
        <p style="margin: 5px 0;"><strong>Reason:</strong> {description}</p>
      </div>

      <p>Thank you for being a valued member!</p>
    </div>
    """


def generate_points_update_sms(points, new_total):
    sign = '+' if points > 0 else ''
    return f"Points Update: {sign}{points:,} points. New total: {new_total:,}."
