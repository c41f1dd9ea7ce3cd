import functools

from shortlinks.auth import AuthMode, AuthorizationPolicy
from shortlinks.dao.redis import ShortLinkRedisDAO, UserRedisDAO
from shortlinks.lambdas import dependencies
from shortlinks.lambdas.responses import notification_response, response_204
from shortlinks.notification import NotificationError
from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinks.usecases import DeleteShortLink
from shortlinks.utils import load_config, app_prefix, base_url, guarantee_500_response
from shortlinks.utils.runtime import get_authorization_header


LAMBDA_NAME = 'delete_link'


@functools.cache
def delete_short_link() -> DeleteShortLink:
    redis_config = dependencies.redis_kwargs(load_config(LAMBDA_NAME))
    return DeleteShortLink(
        short_link_dao=ShortLinkRedisDAO(**redis_config, prefix=app_prefix(), base_url=base_url()),
        user_dao=UserRedisDAO(**redis_config, prefix=app_prefix()),
    )


@functools.cache
def authorization_policy() -> AuthorizationPolicy:
    return dependencies.authorization_policy()


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle DELETE /links/{key} requests

    HTTP responses:
        204: Link soft-deleted
        401: Missing or invalid token, or unknown user
        404: Link doesn't exist, is already deleted or belongs to another user
        500: Internal server error
    """
    key = (event.get('pathParameters') or {}).get('key') or ''

    try:
        owner_id = authorization_policy().authenticate(get_authorization_header(event), AuthMode.REQUIRED)
        delete_short_link().execute(key=key, owner_id=owner_id)
    except NotificationError as notification:
        return notification_response(notification)

    return response_204()
