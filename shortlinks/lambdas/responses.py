"""API Gateway (Lambda proxy) response builders shared by all handlers

Functions:
    json_response(status_code, body, headers=None) -> LambdaResponse
    response_200(body) / response_201(body) / response_204() / response_302(location)
    notification_response(notification) -> LambdaResponse
        Map a NotificationError to its HTTP status and {"errors": [...]} body.
    parse_json_body(event) -> dict
        Decode the request body, raising a BAD_REQUEST notification when it
        isn't a JSON object.
"""

import json
from typing import Any

from shortlinks.notification import ErrorCode, NotificationError, NotificationErrorItem
from shortlinks.types import LambdaEvent, LambdaResponse


__all__ = [
    'STATUS_CODES',
    'json_response',
    'response_200',
    'response_201',
    'response_204',
    'response_302',
    'notification_response',
    'parse_json_body',
]

# fmt: off
STATUS_CODES = {
    ErrorCode.BAD_REQUEST:       400,
    ErrorCode.UNAUTHORIZED:      401,
    ErrorCode.FORBIDDEN:         403,
    ErrorCode.NOT_FOUND:         404,
    ErrorCode.TOO_MANY_REQUESTS: 429,
}
# fmt: on

# TODO: restrict Access-Control-Allow-Origin to the frontend domain once it's deployed
CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Authorization,Content-Type',
    'Access-Control-Allow-Methods': 'OPTIONS,POST,GET,PATCH,DELETE',
}


def json_response(status_code: int, body: Any = None, headers: dict[str, str] | None = None) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **CORS_HEADERS, **(headers or {})},
        'body': json.dumps(body) if body is not None else '',
    }


def response_200(body: Any) -> LambdaResponse:
    return json_response(200, body)


def response_201(body: Any) -> LambdaResponse:
    return json_response(201, body)


def response_204() -> LambdaResponse:
    return json_response(204)


def response_302(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 302,
        'headers': {'Location': location, **CORS_HEADERS},
        'body': '',  # no body needed for redirects
    }


def notification_response(notification: NotificationError) -> LambdaResponse:
    """Render a NotificationError as an HTTP error response

    The status code is picked from the first entry. Entries only expose
    message and field to clients.

    Example:
        >>> notification_response(NotificationError([NotificationErrorItem('Short link not found', ErrorCode.NOT_FOUND)]))
        {'statusCode': 404, 'headers': {...}, 'body': '{"errors": [{"message": "Short link not found", "field": null}]}'}
    """
    errors = notification.get_errors()
    status_code = STATUS_CODES.get(errors[0].code, 400) if errors else 400
    body = {'errors': [{'message': error.message, 'field': error.field} for error in errors]}
    return json_response(status_code, body)


def parse_json_body(event: LambdaEvent) -> dict[str, Any]:
    try:
        body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError as e:
        raise _invalid_body() from e

    if not isinstance(body, dict):
        raise _invalid_body()
    return body


def _invalid_body() -> NotificationError:
    return NotificationError(
        [NotificationErrorItem(message='Request body must be a JSON object', code=ErrorCode.BAD_REQUEST, context='Request')]
    )
