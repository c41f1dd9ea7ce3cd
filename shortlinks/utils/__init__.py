from shortlinks.utils.config import app_env, app_name, app_prefix, load_config, jwt_secret, jwt_expires_in
from shortlinks.utils.helpers import base_url, get_short_url, utcnow, require_environment, guarantee_500_response
from shortlinks.utils.shortener import generate_key
from shortlinks.utils.logging import initialize_logging


__all__ = [
    'generate_key',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'jwt_secret',
    'jwt_expires_in',
    'base_url',
    'get_short_url',
    'utcnow',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
