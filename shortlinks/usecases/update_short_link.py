import logging

from shortlinks.constants import Event
from shortlinks.dao.base import ShortLinkBaseDAO, UserBaseDAO
from shortlinks.usecases.dto import ShortLinkDetails
from shortlinks.usecases.helpers import ensure_owner_exists, short_link_not_found


logger = logging.getLogger(__name__)

CONTEXT = 'UpdateShortLink'


class UpdateShortLink:
    """Point an owned short link at a new destination URL

    The click counter restarts from 0.
    """

    def __init__(self, short_link_dao: ShortLinkBaseDAO, user_dao: UserBaseDAO):
        self.short_link_dao = short_link_dao
        self.user_dao = user_dao

    def execute(self, key: str, owner_id: str, destination_url: str) -> ShortLinkDetails:
        """Change the destination URL of a short link

        Raises:
            NotificationError:
                UNAUTHORIZED if the owner doesn't exist, NOT_FOUND if the link
                doesn't exist or belongs to someone else, BAD_REQUEST for an
                invalid URL.
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

        short_link.change_destination(destination_url)
        self.short_link_dao.update(short_link)

        logger.info(
            'Short link destination updated.',
            extra={'key': key, 'owner_id': owner_id, 'event': Event.SHORT_LINK_UPDATED},
        )
        return ShortLinkDetails.from_model(short_link)
