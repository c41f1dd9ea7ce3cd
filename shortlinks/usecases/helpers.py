import logging

from shortlinks.constants import Event
from shortlinks.dao.base import UserBaseDAO
from shortlinks.models import UserModel
from shortlinks.notification import ErrorCode, NotificationError, NotificationErrorItem


logger = logging.getLogger(__name__)


def ensure_owner_exists(user_dao: UserBaseDAO, owner_id: str, context: str) -> UserModel:
    """Return the owner, or raise an UNAUTHORIZED notification if it doesn't exist

    NOTE: A token can outlive its user, so an unknown owner is reported as an
          authorization failure rather than as a missing resource.
    """
    logger.debug('Checking that the owner exists.', extra={'owner_id': owner_id})
    owner = user_dao.find_by_id(owner_id)
    if owner is None:
        logger.warning(
            'Owner not found.',
            extra={'owner_id': owner_id, 'event': Event.OWNER_NOT_FOUND},
        )
        raise NotificationError([NotificationErrorItem(message='User not found', code=ErrorCode.UNAUTHORIZED, context=context)])
    return owner


def short_link_not_found(context: str) -> NotificationError:
    return NotificationError(
        [
            NotificationErrorItem(
                message='Short link not found or does not belong to the user',
                code=ErrorCode.NOT_FOUND,
                context=context,
            )
        ]
    )
