from shortlinks.usecases.create_short_link import CreateShortLink
from shortlinks.usecases.resolve_short_link import ResolveShortLink
from shortlinks.usecases.list_short_links import ListShortLinks
from shortlinks.usecases.update_short_link import UpdateShortLink
from shortlinks.usecases.delete_short_link import DeleteShortLink
from shortlinks.usecases.create_user import CreateUser
from shortlinks.usecases.login import Login


__all__ = [
    'CreateShortLink',
    'ResolveShortLink',
    'ListShortLinks',
    'UpdateShortLink',
    'DeleteShortLink',
    'CreateUser',
    'Login',
]
