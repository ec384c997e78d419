import logging

from django.contrib.auth.hashers import check_password, make_password

from core.exceptions import AuthError, ConflictError, ValidationError
from core.records import User
from core.services.audit import log_action
from core.store import Store

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def register_user(store: Store, *, name=None, email=None, password=None) -> dict:
    """Create a user and return its public summary (never the hash)."""
    if not name or not email or not password:
        raise ValidationError("Name, email, and password are required")

    # Exact, case-sensitive match
    if any(u.email == email for u in store.users):
        raise ConflictError("User with this email already exists")

    password_hash = make_password(password)
    user = User(id=store.next_id("user"), name=name, email=email, password_hash=password_hash)
    store.users.append(user)

    log_action(user_id=user.id, action="register", object_type="user", object_id=user.id)
    return user.summary()


def verify_credentials(store: Store, email, password) -> User:
    """Return the user for ``email``/``password`` or raise a generic AuthError.

    An unknown email and a wrong password fail the same way.
    """
    user = next((u for u in store.users if u.email == email), None)
    if user is None or not check_password(password, user.password_hash):
        log_action(user_id=None, action="login", object_type="user",
                   detail={"result": "fail"})
        raise AuthError(INVALID_CREDENTIALS)

    log_action(user_id=user.id, action="login", object_type="user", object_id=user.id,
               detail={"result": "ok"})
    return user
