from rest_framework import exceptions, status

from apps.core.exception_handler import chitfund_exception_handler
from apps.core.exceptions import ConflictError, InvalidError, InvalidTransitionError


def handle(exc):
    return chitfund_exception_handler(exc, {})


class TestExceptionHandler:

    def test_chitfund_error_kind_and_message(self):
        response = handle(ConflictError('Username already taken'))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data == {'kind': 'conflict', 'message': 'Username already taken'}

    def test_invalid_transition(self):
        response = handle(InvalidTransitionError('Auction is completed'))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['kind'] == 'invalid_transition'

    def test_invalid_error_with_field(self):
        response = handle(InvalidError('User is not a member', field='user_id'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['fields'] == {'user_id': ['User is not a member']}

    def test_validation_error_lists_fields(self):
        response = handle(exceptions.ValidationError({'duration': ['Ensure this value is less than or equal to 60.']}))

        assert response.data['kind'] == 'invalid'
        assert 'duration' in response.data['fields']

    def test_drf_errors_map_to_kinds(self):
        assert handle(exceptions.NotAuthenticated()).data['kind'] == 'unauthenticated'
        assert handle(exceptions.PermissionDenied()).data['kind'] == 'forbidden'
        assert handle(exceptions.NotFound()).data['kind'] == 'not_found'

    def test_unknown_exception_left_alone(self):
        assert handle(ValueError('boom')) is None
