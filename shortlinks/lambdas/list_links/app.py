import functools

from shortlinks.auth import AuthMode, AuthorizationPolicy
from shortlinks.dao.redis import ShortLinkRedisDAO, UserRedisDAO
from shortlinks.lambdas import dependencies
from shortlinks.lambdas.responses import notification_response, response_200
from shortlinks.notification import NotificationError
from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinks.usecases import ListShortLinks
from shortlinks.utils import load_config, app_prefix, base_url, guarantee_500_response
from shortlinks.utils.runtime import get_authorization_header


LAMBDA_NAME = 'list_links'


@functools.cache
def list_short_links() -> ListShortLinks:
    redis_config = dependencies.redis_kwargs(load_config(LAMBDA_NAME))
    return ListShortLinks(
        short_link_dao=ShortLinkRedisDAO(**redis_config, prefix=app_prefix(), base_url=base_url()),
        user_dao=UserRedisDAO(**redis_config, prefix=app_prefix()),
    )


@functools.cache
def authorization_policy() -> AuthorizationPolicy:
    return dependencies.authorization_policy()


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle GET /links requests

    HTTP responses:
        200: {"data": [{key, short_url, destination_url, click_count, created_at, updated_at}, ...]}
        401: Missing or invalid token, or unknown user
        500: Internal server error
    """
    try:
        owner_id = authorization_policy().authenticate(get_authorization_header(event), AuthMode.REQUIRED)
        short_links = list_short_links().execute(owner_id)
    except NotificationError as notification:
        return notification_response(notification)

    return response_200({'data': [short_link.to_dict() for short_link in short_links]})
