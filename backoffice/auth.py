from functools import wraps
from ninja.security import SessionAuth
from ninja.errors import HttpError

from backoffice.utils.custom_logger import CustomLogger

logger = CustomLogger("backoffice")

UNAUTHORIZED = "unauthorized"


class StaffSessionAuth(SessionAuth):
    """django session auth, restricted to staff accounts"""

    def authenticate(self, request, key):
        user = request.user
        if user.is_authenticated and user.is_staff and user.is_active:
            return user
        return None


def has_permission(permissions: list):
    """require every django permission in the list, e.g. backoffice.delete_district"""

    def decorator(api_endpoint):
        @wraps(api_endpoint)
        def wrapper(*args, **kwargs):
            request = args[0]
            user = getattr(request, "user", None)
            if user is None or not user.is_authenticated:
                raise HttpError(401, UNAUTHORIZED)
            if not user.has_perms(permissions):
                logger.warning("%s is missing one of %s", user.get_username(), permissions)
                raise HttpError(403, "not allowed")
            return api_endpoint(*args, **kwargs)

        return wrapper

    return decorator
