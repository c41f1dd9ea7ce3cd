from shortlinks.models.short_link_model import ShortLinkModel
from shortlinks.models.user_model import UserModel
from shortlinks.models.password_strength import PasswordStrengthSpecification


__all__ = [
    'ShortLinkModel',
    'UserModel',
    'PasswordStrengthSpecification',
]
