import json

from flask import session
from flask_login import login_user, logout_user

from models.user import User, ROLES
from services.api import TOKEN_KEY

ROLE_KEY = "user_role"
USER_KEY = "user_data"


def login_session(user: User, token: str):
    session.permanent = True
    session[TOKEN_KEY] = token
    session[ROLE_KEY] = user.role
    session[USER_KEY] = json.dumps(user.to_dict())
    login_user(user)


def logout_session():
    logout_user()
    for key in (TOKEN_KEY, ROLE_KEY, USER_KEY):
        session.pop(key, None)


def current_session_user():
    """Rebuild the user from the session, or ``None`` when logged out."""
    token = session.get(TOKEN_KEY)
    role = session.get(ROLE_KEY)
    if not token or role not in ROLES:
        return None

    raw = session.get(USER_KEY)
    if raw:
        try:
            return User(**json.loads(raw))
        except (ValueError, TypeError):
            pass
    return User.minimal(role)


def session_role():
    if not session.get(TOKEN_KEY):
        return None
    return session.get(ROLE_KEY)
