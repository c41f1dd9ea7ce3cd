import functools

from shortlinks.auth import AuthMode, AuthorizationPolicy
from shortlinks.dao.redis import ShortLinkRedisDAO, UserRedisDAO
from shortlinks.lambdas import dependencies
from shortlinks.lambdas.responses import notification_response, parse_json_body, response_200
from shortlinks.notification import NotificationError
from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinks.usecases import UpdateShortLink
from shortlinks.utils import load_config, app_prefix, base_url, guarantee_500_response
from shortlinks.utils.runtime import get_authorization_header


LAMBDA_NAME = 'update_link'


@functools.cache
def update_short_link() -> UpdateShortLink:
    redis_config = dependencies.redis_kwargs(load_config(LAMBDA_NAME))
    return UpdateShortLink(
        short_link_dao=ShortLinkRedisDAO(**redis_config, prefix=app_prefix(), base_url=base_url()),
        user_dao=UserRedisDAO(**redis_config, prefix=app_prefix()),
    )


@functools.cache
def authorization_policy() -> AuthorizationPolicy:
    return dependencies.authorization_policy()


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle PATCH /links/{key} requests

    Request body:
        {"destination_url": "<new url>"}

    HTTP responses:
        200: {key, short_url, destination_url, click_count, created_at, updated_at}
        400: Invalid JSON body or invalid URL
        401: Missing or invalid token, or unknown user
        404: Link doesn't exist or belongs to another user
        500: Internal server error
    """
    key = (event.get('pathParameters') or {}).get('key') or ''

    try:
        owner_id = authorization_policy().authenticate(get_authorization_header(event), AuthMode.REQUIRED)
        body = parse_json_body(event)
        updated = update_short_link().execute(key=key, owner_id=owner_id, destination_url=body.get('destination_url'))
    except NotificationError as notification:
        return notification_response(notification)

    return response_200(updated.to_dict())
