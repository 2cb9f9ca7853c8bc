"""
Auth Service
Account creation and credential checks. Views and tests go through here
so a new account always comes with its four predefined shelves.
"""
import logging
from typing import Optional

from bookshelf_app.core.extensions import db
from bookshelf_app.models import User
from bookshelf_app.modules.shelves.services import PredefinedShelfService

logger = logging.getLogger(__name__)


class AuthService:

    @staticmethod
    def register_user(username: str, password: str, email: Optional[str] = None,
                      timezone: str = 'UTC') -> User:
        user = User(username=username.strip(), email=email or None, timezone=timezone or 'UTC')
        user.set_password(password)
        db.session.add(user)
        db.session.flush()

        PredefinedShelfService.create_default_shelves(user.user_id)
        db.session.commit()

        logger.info("Registered user %s (%s)", user.user_id, user.username)
        return user

    @staticmethod
    def authenticate_user(username: str, password: str) -> Optional[User]:
        """The matching user, or None when the username or password is wrong."""
        user = User.query.filter_by(username=(username or '').strip()).first()
        if user is None or not user.check_password(password):
            logger.info("Failed login for %r", username)
            return None
        return user
