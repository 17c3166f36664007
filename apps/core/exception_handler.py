"""
DRF exception handler rendering every error as ``{"kind", "message"}``.

Validation errors additionally carry ``fields`` with per-field messages.
"""
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions
from rest_framework.views import exception_handler

from .exceptions import ChitFundError, InvalidError


def _kind_for(exc):
    if isinstance(exc, ChitFundError):
        return exc.kind
    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        return 'unauthenticated'
    if isinstance(exc, (exceptions.PermissionDenied, DjangoPermissionDenied)):
        return 'forbidden'
    if isinstance(exc, (exceptions.NotFound, Http404)):
        return 'not_found'
    if isinstance(exc, exceptions.ValidationError):
        return 'invalid'
    if isinstance(exc, exceptions.APIException):
        return exc.default_code
    return 'error'


def _message_for(data):
    if isinstance(data, dict) and 'detail' in data:
        return str(data['detail'])
    if isinstance(data, list) and data:
        return str(data[0])
    return 'Invalid input.'


def chitfund_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return None

    body = {'kind': _kind_for(exc)}

    if isinstance(exc, exceptions.ValidationError):
        body['message'] = 'Invalid input.'
        if isinstance(response.data, dict):
            body['fields'] = response.data
        else:
            body['fields'] = {'non_field_errors': response.data}
    else:
        body['message'] = _message_for(response.data)
        if isinstance(exc, InvalidError) and exc.field:
            body['fields'] = {exc.field: [body['message']]}

    response.data = body
    return response
