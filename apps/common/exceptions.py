"""
Domain errors for the points ledger and the DRF exception handler that
renders them (and DRF's own errors) in the common response envelope.
"""
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger(__name__)


class LoyaltyError(Exception):
    """Base class for errors surfaced to API callers with a specific reason."""
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = 'LOYALTY_ERROR'
    default_message = 'The operation could not be completed'
    retryable = False

    def __init__(self, message=None, **context):
        self.message = message or self.default_message
        self.context = context
        super().__init__(self.message)


class DuplicateEmail(LoyaltyError):
    status_code = status.HTTP_409_CONFLICT
    error_code = 'DUPLICATE_EMAIL'
    default_message = (
        'This email address is already registered. '
        'Please try logging in or use a different email address.'
    )


class InvalidReferralCode(LoyaltyError):
    error_code = 'INVALID_REFERRAL_CODE'
    default_message = 'Invalid referral code'


class InsufficientBalance(LoyaltyError):
    error_code = 'INSUFFICIENT_BALANCE'
    default_message = 'Insufficient points balance'


class RewardUnavailable(LoyaltyError):
    error_code = 'REWARD_UNAVAILABLE'
    default_message = 'This reward is not available'


class RewardInUse(LoyaltyError):
    status_code = status.HTTP_409_CONFLICT
    error_code = 'REWARD_IN_USE'
    default_message = 'This reward has been redeemed before; mark it unavailable instead'


class NotFound(LoyaltyError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = 'NOT_FOUND'
    default_message = 'Resource not found'


class Unauthorized(LoyaltyError):
    status_code = status.HTTP_403_FORBIDDEN
    error_code = 'UNAUTHORIZED'
    default_message = 'Admin access required'


class InvalidCredentials(LoyaltyError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = 'INVALID_CREDENTIALS'
    default_message = 'Invalid email or password'


class StorageError(LoyaltyError):
    """
    Persistence failure inside an atomic unit. The unit has been rolled back;
    the caller may retry.
    """
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    error_code = 'STORAGE_ERROR'
    default_message = 'The points service is temporarily unavailable. Please try again.'
    retryable = True


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses
    """
    if isinstance(exc, LoyaltyError):
        if isinstance(exc, StorageError):
            logger.error(f"Storage failure: {exc}", exc_info=exc.__cause__ or exc)
        else:
            logger.info(f"{exc.error_code}: {exc.message}")

        data = {
            'code': exc.status_code,
            'msg': exc.message,
            'error': exc.error_code,
        }
        if exc.retryable:
            data['retryable'] = True
        return Response(data, status=exc.status_code)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        logger.warning(f"API Exception: {exc}")

        custom_response_data = {
            'code': response.status_code,
            'msg': 'An error occurred',
            'errors': response.data
        }

        # Handle specific error types
        if response.status_code == status.HTTP_400_BAD_REQUEST:
            custom_response_data['msg'] = 'Validation error'
            custom_response_data['error'] = 'VALIDATION_ERROR'
        elif response.status_code == status.HTTP_401_UNAUTHORIZED:
            custom_response_data['msg'] = 'Authentication required'
            custom_response_data['error'] = 'NOT_AUTHENTICATED'
        elif response.status_code == status.HTTP_403_FORBIDDEN:
            custom_response_data['msg'] = 'Permission denied'
            custom_response_data['error'] = 'UNAUTHORIZED'
        elif response.status_code == status.HTTP_404_NOT_FOUND:
            custom_response_data['msg'] = 'Resource not found'
            custom_response_data['error'] = 'NOT_FOUND'
        elif response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            custom_response_data['msg'] = 'Method not allowed'

        response.data = custom_response_data

    return response
