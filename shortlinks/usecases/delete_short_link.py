import logging

from shortlinks.constants import Event
from shortlinks.dao.base import ShortLinkBaseDAO, UserBaseDAO
from shortlinks.usecases.helpers import ensure_owner_exists, short_link_not_found


logger = logging.getLogger(__name__)

CONTEXT = 'DeleteShortLink'


class DeleteShortLink:
    def __init__(self, short_link_dao: ShortLinkBaseDAO, user_dao: UserBaseDAO):
        self.short_link_dao = short_link_dao
        self.user_dao = user_dao

    def execute(self, key: str, owner_id: str) -> None:
        """Soft-delete an owned short link

        A deleted link is hidden from every read, so deleting it again is
        reported as NOT_FOUND.
        """
        ensure_owner_exists(self.user_dao, owner_id, CONTEXT)

        logger.debug('Looking up short link of owner.', extra={'key': key, 'owner_id': owner_id})
        short_link = self.short_link_dao.find_by_key_and_owner(key, owner_id)
        if short_link is None:
            logger.warning(
                'Short link not found or not owned by caller.',
                extra={'key': key, 'owner_id': owner_id, 'event': Event.SHORT_LINK_NOT_FOUND},
            )
            raise short_link_not_found(CONTEXT)

        short_link.soft_delete()
        self.short_link_dao.delete(short_link)

        logger.info(
            'Short link deleted.',
            extra={'key': key, 'owner_id': owner_id, 'event': Event.SHORT_LINK_DELETED},
        )
