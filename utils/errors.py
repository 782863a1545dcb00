"""
Errors Module - Domain errors raised by request handlers

Handlers raise these and a single application error handler turns them
into JSON responses of the form {"error": message, "code": code}.
"""


class ApiError(Exception):
    """Base class for errors reported to API callers"""
    status_code = 400
    code = None
    message = 'Bad request'

    def __init__(self, message=None, code=None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        if code:
            self.code = code

    def to_dict(self):
        payload = {'error': self.message}
        if self.code:
            payload['code'] = self.code
        return payload


class InvalidArgument(ApiError):
    message = 'Invalid argument'
    code = 'INVALID_ARGUMENT'


class MissingField(ApiError):
    """A required input field was absent or blank"""

    def __init__(self, field, label=None):
        self.field = field
        label = label or field.replace('_', ' ').capitalize()
        super().__init__(f'{label} is required', f'MISSING_{field.upper()}')


class NotFound(ApiError):
    status_code = 404
    message = 'Record not found'


class DuplicateSlug(ApiError):
    message = 'A blog post with this slug already exists'
    code = 'DUPLICATE_SLUG'


class Unauthorized(ApiError):
    status_code = 401
    message = 'Invalid email or password'
    code = 'INVALID_CREDENTIALS'


__all__ = [
    'ApiError',
    'InvalidArgument',
    'MissingField',
    'NotFound',
    'DuplicateSlug',
    'Unauthorized',
]
