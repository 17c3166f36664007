"""
Request authentication against the entity store.

Both classes resolve the stored user id on every request and hand DRF an
``ActorContext``; a user that no longer exists is never authenticated.
"""

import logging

from rest_framework.authentication import SessionAuthentication
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.serializers import TokenRefreshSerializer
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import RefreshToken

from apps.core.actor import ActorContext
from apps.storage import get_store

logger = logging.getLogger(__name__)

SESSION_USER_KEY = '_chitfund_user_id'


class StoreJWTAuthentication(JWTAuthentication):
    """Bearer token authentication resolving the user id claim through the store."""

    def get_user(self, validated_token):
        try:
            user_id = int(validated_token[api_settings.USER_ID_CLAIM])
        except (KeyError, TypeError, ValueError):
            raise InvalidToken('Token contained no recognizable user identification')

        user = get_store().get_user(user_id)
        if user is None:
            raise AuthenticationFailed('User not found', code='user_not_found')
        return ActorContext.from_user(user)


class StoreTokenRefreshSerializer(TokenRefreshSerializer):
    """
    Refresh that resolves the user id claim through the store.

    The stock serializer looks the claim up in the auth user table, which
    holds none of our users.
    """

    def validate(self, attrs):
        refresh = RefreshToken(attrs['refresh'])

        try:
            user_id = int(refresh.payload[api_settings.USER_ID_CLAIM])
        except (KeyError, TypeError, ValueError):
            raise InvalidToken('Token contained no recognizable user identification')

        if get_store().get_user(user_id) is None:
            raise AuthenticationFailed('User not found', code='user_not_found')

        data = {'access': str(refresh.access_token)}

        if api_settings.ROTATE_REFRESH_TOKENS:
            refresh.set_jti()
            refresh.set_exp()
            refresh.set_iat()
            data['refresh'] = str(refresh)

        return data


class StoreSessionAuthentication(SessionAuthentication):
    """Server-side session holding only the user id."""

    def authenticate(self, request):
        user_id = request._request.session.get(SESSION_USER_KEY)
        if user_id is None:
            return None

        user = get_store().get_user(user_id)
        if user is None:
            logger.info("Session refers to missing user #%s", user_id)
            return None

        self.enforce_csrf(request)
        return (ActorContext.from_user(user), None)


def issue_tokens(user) -> dict:
    """JWT pair for ``user``, carrying its store id."""
    refresh = RefreshToken()
    refresh[api_settings.USER_ID_CLAIM] = user.id
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


def login_session(request, user):
    """Bind ``user`` to the request's session under a fresh session key."""
    session = request._request.session
    session.cycle_key()
    session[SESSION_USER_KEY] = user.id


def logout_session(request):
    request._request.session.flush()
