import logging

from shortlinks.dao.base import ShortLinkBaseDAO, UserBaseDAO
from shortlinks.usecases.dto import ShortLinkDetails
from shortlinks.usecases.helpers import ensure_owner_exists


logger = logging.getLogger(__name__)

CONTEXT = 'ListShortLinks'


class ListShortLinks:
    def __init__(self, short_link_dao: ShortLinkBaseDAO, user_dao: UserBaseDAO):
        self.short_link_dao = short_link_dao
        self.user_dao = user_dao

    def execute(self, owner_id: str) -> list[ShortLinkDetails]:
        """Return the owner's active short links, newest first"""
        ensure_owner_exists(self.user_dao, owner_id, CONTEXT)

        logger.debug('Listing short links of owner.', extra={'owner_id': owner_id})
        short_links = self.short_link_dao.find_by_owner(owner_id)
        return [ShortLinkDetails.from_model(short_link) for short_link in short_links if not short_link.is_deleted]
