import functools
import logging

from shortlinks.auth import AuthMode, AuthorizationPolicy
from shortlinks.dao.redis import ShortLinkRedisDAO, UserRedisDAO
from shortlinks.lambdas import dependencies
from shortlinks.lambdas.responses import notification_response, parse_json_body, response_201
from shortlinks.notification import NotificationError
from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinks.usecases import CreateShortLink
from shortlinks.utils import load_config, app_prefix, base_url, guarantee_500_response
from shortlinks.utils.runtime import get_authorization_header


logger = logging.getLogger(__name__)

LAMBDA_NAME = 'shorten_url'


@functools.cache
def create_short_link() -> CreateShortLink:
    redis_config = dependencies.redis_kwargs(load_config(LAMBDA_NAME))
    return CreateShortLink(
        short_link_dao=ShortLinkRedisDAO(**redis_config, prefix=app_prefix(), base_url=base_url()),
        user_dao=UserRedisDAO(**redis_config, prefix=app_prefix()),
        base_url=base_url(),
    )


@functools.cache
def authorization_policy() -> AuthorizationPolicy:
    return dependencies.authorization_policy()


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle POST /links requests

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Authenticate the caller (optional, anonymous links are allowed)
    - Step 2: Extract destination_url (and optional key) from request body
    - Step 3: Create and persist the short link (via use case)
    - Step 4: Respond with 201 and the new short link

    HTTP responses:
        201: Short link created
            key, short_url, destination_url
        400: Invalid JSON body, invalid URL or key, key already in use
        401: Invalid token, or token of a user which doesn't exist
        500: Internal server error

    Example:
        >>> event = {'body': '{"destination_url": "https://example.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        201
    """
    try:
        owner_id = authorization_policy().authenticate(get_authorization_header(event), AuthMode.OPTIONAL)
        body = parse_json_body(event)
        created = create_short_link().execute(
            destination_url=body.get('destination_url'),
            owner_id=owner_id,
            key=body.get('key'),
        )
    except NotificationError as notification:
        logger.info('Short link creation rejected.', extra={'errors': notification.to_dict()['errors']})
        return notification_response(notification)

    return response_201(created.to_dict())
