"""Create a short link, optionally owned by an authenticated user

Procedure:
    - Step 1: Verify the owner exists (only when an owner is given)
    - Step 2: Build the ShortLinkModel (validates URL and key)
    - Step 3: Persist the link
    - Step 4: Return the CreatedShortLink projection
"""

import logging

from shortlinks.constants import Event
from shortlinks.dao.base import ShortLinkBaseDAO, UserBaseDAO
from shortlinks.dao.exceptions import ShortLinkAlreadyExistsError
from shortlinks.models import ShortLinkModel
from shortlinks.notification import ErrorCode, NotificationError, NotificationErrorItem
from shortlinks.usecases.dto import CreatedShortLink
from shortlinks.usecases.helpers import ensure_owner_exists


logger = logging.getLogger(__name__)

CONTEXT = 'CreateShortLink'


class CreateShortLink:
    def __init__(self, short_link_dao: ShortLinkBaseDAO, user_dao: UserBaseDAO, base_url: str | None = None):
        self.short_link_dao = short_link_dao
        self.user_dao = user_dao
        self.base_url = base_url

    def execute(self, destination_url: str, owner_id: str | None = None, key: str | None = None) -> CreatedShortLink:
        """Create a short link

        Args:
            destination_url (str): URL the short link redirects to.
            owner_id (str | None): Authenticated caller, None for anonymous links.
            key (str | None): Caller-chosen key. Generated when None.

        Raises:
            NotificationError:
                UNAUTHORIZED if the owner doesn't exist, BAD_REQUEST for an
                invalid URL or key, or a key which is already in use.
            ShortLinkAlreadyExistsError:
                If a generated key collides with an existing one.
            DataStoreError:
                On data store failures.
        """
        if owner_id is not None:
            ensure_owner_exists(self.user_dao, owner_id, CONTEXT)

        short_link = ShortLinkModel(destination_url=destination_url, key=key, owner_id=owner_id, base_url=self.base_url)

        try:
            self.short_link_dao.create(short_link, owner_id=owner_id)
        except ShortLinkAlreadyExistsError as e:
            if key is None:
                raise
            logger.info('Requested key is already in use.', extra={'key': key})
            raise NotificationError(
                [NotificationErrorItem(message='Key is already in use', code=ErrorCode.BAD_REQUEST, context=CONTEXT, field='key')]
            ) from e

        logger.info(
            'Short link created.',
            extra={'key': short_link.key, 'owner_id': owner_id, 'event': Event.SHORT_LINK_CREATED},
        )
        return CreatedShortLink.from_model(short_link)
