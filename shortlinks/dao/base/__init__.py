from shortlinks.dao.base.short_link_base_dao import ShortLinkBaseDAO
from shortlinks.dao.base.user_base_dao import UserBaseDAO


__all__ = [
    'ShortLinkBaseDAO',
    'UserBaseDAO',
]
