"""
Typed failures raised by the rule engine.

Each failure carries a ``kind`` so callers (and the API envelope) can tell a
malformed request from a conflict with stored data without parsing messages.
"""
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, PermissionDenied


class RuleError(APIException):
    kind = 'RuleError'

    def __init__(self, detail=None, code=None, field=None):
        super().__init__(detail=detail, code=code)
        self.field = field

    @property
    def message(self):
        return str(self.detail)

    def as_dict(self):
        return {
            'kind': self.kind,
            'httpStatusHint': self.status_code,
            'message': self.message,
        }


class ValidationError(RuleError):
    """Malformed or missing input, bad id shape, bad enum value or an
    unusable configuration value."""

    kind = 'ValidationError'
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'invalid'


class ConflictError(RuleError):
    """Input is well formed but collides with stored data: duplicate names,
    exhausted capacity or dependents blocking a delete."""

    kind = 'ConflictError'
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Request conflicts with existing data.'
    default_code = 'conflict'

    def __init__(self, detail=None, code=None, field=None, count=None):
        super().__init__(detail=detail, code=code, field=field)
        self.count = count


class NotFoundError(RuleError, NotFound):
    kind = 'NotFoundError'
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found.'
    default_code = 'not_found'


class ForbiddenError(RuleError, PermissionDenied):
    kind = 'ForbiddenError'
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You do not have permission to perform this action.'
    default_code = 'permission_denied'
