import functools

from shortlinks.dao.redis import UserRedisDAO
from shortlinks.lambdas import dependencies
from shortlinks.lambdas.responses import notification_response, parse_json_body, response_200
from shortlinks.notification import NotificationError
from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinks.usecases import Login
from shortlinks.utils import load_config, app_prefix, guarantee_500_response


LAMBDA_NAME = 'login'


@functools.cache
def login() -> Login:
    redis_config = dependencies.redis_kwargs(load_config(LAMBDA_NAME))
    return Login(
        user_dao=UserRedisDAO(**redis_config, prefix=app_prefix()),
        password_hasher=dependencies.password_hasher(),
        token_provider=dependencies.token_provider(),
    )


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle POST /auth/login requests

    Request body:
        {"email": "...", "password": "..."}

    HTTP responses:
        200: {"access_token": "<jwt>"}
        400: Invalid JSON body, missing fields or malformed email
        401: Unknown email or wrong password
        500: Internal server error
    """
    try:
        body = parse_json_body(event)
        token = login().execute(email=body.get('email'), password=body.get('password'))
    except NotificationError as notification:
        return notification_response(notification)

    return response_200(token.to_dict())
