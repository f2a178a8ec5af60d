"""
Tests for points notifications and their decoupling from ledger commits.
"""
from smtplib import SMTPException
from unittest import mock

import pytest
import requests
from django.db import DatabaseError

from apps.common.exceptions import InsufficientBalance
from apps.common.services import NotificationService
from apps.common.services.notification_service import (
    generate_points_update_email, generate_points_update_sms
)
from apps.points.models import PointsTransaction
from apps.points.services import AdminAdjustmentService, BalanceMutator
from tests.factories import UserFactory, credit


@pytest.mark.django_db
class TestNotificationScheduling:

    def test_notification_sent_after_commit(self, admin_user, django_capture_on_commit_callbacks, mailoutbox):
        user = UserFactory(email='member@example.com')
        with django_capture_on_commit_callbacks(execute=True):
            AdminAdjustmentService.adjust(admin_user, user.pk, 250, 'bonus')

        assert len(mailoutbox) == 1
        message = mailoutbox[0]
        assert message.to == ['member@example.com']
        assert message.subject == 'Points Update Notification'
        assert 'bonus' in message.alternatives[0][0]

    def test_nothing_scheduled_for_rejected_change(self, django_capture_on_commit_callbacks, mailoutbox):
        user = UserFactory()
        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            with pytest.raises(InsufficientBalance):
                BalanceMutator.apply_delta(user.pk, -1, PointsTransaction.Type.REDEEMED, 'x')

        assert callbacks == []
        assert mailoutbox == []

    def test_email_failure_does_not_undo_change(self, admin_user, django_capture_on_commit_callbacks):
        user = UserFactory()
        with mock.patch(
            'apps.common.services.notification_service.send_mail',
            side_effect=SMTPException('relay down'),
        ):
            with django_capture_on_commit_callbacks(execute=True):
                AdminAdjustmentService.adjust(admin_user, user.pk, 250, 'bonus')

        user.refresh_from_db()
        assert user.points == 250

    def test_failed_user_lookup_does_not_fail_committed_change(self, admin_user, django_capture_on_commit_callbacks):
        user = credit(UserFactory(), 1000)
        with mock.patch(
            'apps.common.services.notification_service.get_user_model',
            side_effect=DatabaseError('connection lost'),
        ):
            with django_capture_on_commit_callbacks(execute=True):
                entry = AdminAdjustmentService.adjust(admin_user, user.pk, 250, 'bonus')

        assert entry.points == 250
        user.refresh_from_db()
        assert user.points == 1250

    def test_unexpected_sms_error_is_logged_not_raised(self, settings):
        settings.BREVO_API_KEY = 'test-key'
        user = UserFactory(phone_number='+15551234567')
        with mock.patch(
            'apps.common.services.notification_service.requests.post',
            side_effect=ValueError('bad payload'),
        ):
            assert NotificationService.points_updated(user.pk, 100, 100, 'x') is False

    def test_disabled_notifications_send_nothing(self, settings, mailoutbox):
        settings.LOYALTY = {**settings.LOYALTY, 'NOTIFICATIONS_ENABLED': False}
        user = credit(UserFactory(), 100)
        assert NotificationService.points_updated(user.pk, 100, 100, 'x') is False
        assert mailoutbox == []

    def test_missing_user_is_skipped(self):
        assert NotificationService.points_updated(999999, 100, 100, 'x') is False


@pytest.mark.django_db
class TestSmsDelivery:

    def test_sms_skipped_without_api_key(self):
        user = UserFactory()
        with mock.patch('apps.common.services.notification_service.requests.post') as post:
            assert NotificationService.send_sms(user, 'hello') is False
        post.assert_not_called()

    def test_sms_posts_to_brevo(self, settings):
        settings.BREVO_API_KEY = 'test-key'
        user = UserFactory(phone_number='+15551234567')
        with mock.patch('apps.common.services.notification_service.requests.post') as post:
            assert NotificationService.send_sms(user, 'hello') is True

        _, kwargs = post.call_args
        assert kwargs['headers']['api-key'] == 'test-key'
        assert kwargs['json']['recipient'] == '+15551234567'
        assert kwargs['json']['content'] == 'hello'
        assert kwargs['json']['type'] == 'transactional'

    def test_sms_failure_returns_false(self, settings):
        settings.BREVO_API_KEY = 'test-key'
        user = UserFactory()
        with mock.patch(
            'apps.common.services.notification_service.requests.post',
            side_effect=requests.ConnectionError('unreachable'),
        ):
            assert NotificationService.send_sms(user, 'hello') is False


class TestNotificationContent:

    def test_email_shows_added_points(self):
        html = generate_points_update_email('Ada', 2500, 4500, 'Referral bonus')
        assert 'Points Added' in html
        assert '2,500' in html
        assert '4,500' in html
        assert 'Hello Ada' in html

    def test_email_shows_deducted_points(self):
        html = generate_points_update_email('Ada', -800, 200, 'Redeemed Mug')
        assert 'Points Deducted' in html
        assert '800' in html

    def test_sms_text(self):
        assert generate_points_update_sms(250, 1250) == 'Points Update: +250 points. New total: 1,250.'
        assert generate_points_update_sms(-800, 200) == 'Points Update: -800 points. New total: 200.'

    def test_email_escapes_name_and_reason(self):
        html = generate_points_update_email('<b>Ada</b>', 100, 100, '<script>alert(1)</script>')
        assert '<script>' not in html
        assert '&lt;script&gt;alert(1)&lt;/script&gt;' in html
        assert 'Hello &lt;b&gt;Ada&lt;/b&gt;' in html
