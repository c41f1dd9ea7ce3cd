import logging

from shortlinks.constants import Event
from shortlinks.dao.base import ShortLinkBaseDAO
from shortlinks.notification import ErrorCode, NotificationError, NotificationErrorItem
from shortlinks.usecases.dto import ResolvedShortLink


logger = logging.getLogger(__name__)

CONTEXT = 'ResolveShortLink'


class ResolveShortLink:
    """Resolve a key to its destination URL and count the click

    NOTE: The click is stored with the DAO's atomic record_click(), which
          writes nothing but the counter. A destination change committed
          between the lookup and the click is kept.
    """

    def __init__(self, short_link_dao: ShortLinkBaseDAO):
        self.short_link_dao = short_link_dao

    def execute(self, key: str) -> ResolvedShortLink:
        logger.debug('Looking up short link.', extra={'key': key})
        short_link = self.short_link_dao.find_by_key(key)
        if short_link is None:
            logger.info('Short link not found.', extra={'key': key, 'event': Event.SHORT_LINK_NOT_FOUND})
            raise NotificationError([NotificationErrorItem(message='Short link not found', code=ErrorCode.NOT_FOUND, context=CONTEXT)])

        short_link.increment_click_count()
        short_link.click_count = self.short_link_dao.record_click(short_link)

        logger.info(
            'Short link resolved.',
            extra={'key': key, 'click_count': short_link.click_count, 'event': Event.SHORT_LINK_RESOLVED},
        )
        return ResolvedShortLink(destination_url=short_link.destination_url)
