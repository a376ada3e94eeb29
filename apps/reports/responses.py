"""
JSON request/response helpers shared by the API views.

Error mapping:
- ValidationError      -> 400
- PermissionDenied     -> 403
- ObjectDoesNotExist   -> 404
"""

import json

from django.core.exceptions import ValidationError
from django.http import JsonResponse


def json_body(request):
    """
    Decode a JSON object from the request body.

    Raises:
        ValidationError: If the body is not a JSON object
    """
    if not request.body:
        return {}
    try:
        payload = json.loads(request.body)
    except (ValueError, UnicodeDecodeError):
        raise ValidationError("Request body must be valid JSON.")
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object.")
    return payload


def error_response(message, status):
    return JsonResponse({'message': message}, status=status)


def validation_error_response(error):
    """Flatten a ValidationError into a single 400 message."""
    return error_response(' '.join(error.messages), status=400)


def form_error_response(form):
    """First error of each invalid field, joined, as a 400."""
    messages = []
    for errors in form.errors.values():
        for message in errors:
            if message not in messages:
                messages.append(message)
    return error_response(' '.join(messages), status=400)
