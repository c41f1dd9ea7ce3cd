import functools
import logging

from shortlinks.dao.redis import ShortLinkRedisDAO
from shortlinks.lambdas import dependencies
from shortlinks.lambdas.responses import notification_response, response_302
from shortlinks.notification import NotificationError
from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinks.usecases import ResolveShortLink
from shortlinks.utils import load_config, app_prefix, base_url, guarantee_500_response


logger = logging.getLogger(__name__)

LAMBDA_NAME = 'redirect_url'


@functools.cache
def resolve_short_link() -> ResolveShortLink:
    redis_config = dependencies.redis_kwargs(load_config(LAMBDA_NAME))
    return ResolveShortLink(short_link_dao=ShortLinkRedisDAO(**redis_config, prefix=app_prefix(), base_url=base_url()))


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle GET /{key} requests

    HTTP responses:
        302: Successful redirect
            headers:
                Location: destination URL
        404: Missing key, unknown key or deleted link
        500: Internal server error

    Example:
        >>> event = {'pathParameters': {'key': 'Gh71TC'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    key = (event.get('pathParameters') or {}).get('key') or ''

    try:
        resolved = resolve_short_link().execute(key)
    except NotificationError as notification:
        return notification_response(notification)

    logger.debug('Redirecting client to destination URL. Responding with 302.', extra={'key': key})
    return response_302(location=resolved.destination_url)
