import functools

from shortlinks.dao.redis import UserRedisDAO
from shortlinks.lambdas import dependencies
from shortlinks.lambdas.responses import notification_response, parse_json_body, response_201
from shortlinks.notification import NotificationError
from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinks.usecases import CreateUser
from shortlinks.utils import load_config, app_prefix, guarantee_500_response


LAMBDA_NAME = 'create_user'


@functools.cache
def create_user() -> CreateUser:
    redis_config = dependencies.redis_kwargs(load_config(LAMBDA_NAME))
    return CreateUser(
        user_dao=UserRedisDAO(**redis_config, prefix=app_prefix()),
        password_hasher=dependencies.password_hasher(),
    )


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle POST /users requests

    Request body:
        {"name": "...", "email": "...", "password": "..."}

    HTTP responses:
        201: {id, name, email, created_at}
        400: Invalid JSON body, invalid fields, weak password or email already registered
        500: Internal server error
    """
    try:
        body = parse_json_body(event)
        created = create_user().execute(name=body.get('name'), email=body.get('email'), password=body.get('password'))
    except NotificationError as notification:
        return notification_response(notification)

    return response_201(created.to_dict())
