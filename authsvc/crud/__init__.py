from .user import (
    get_user_by_username,
    get_user_by_id,
    create_user,
    UserStore,
)

__all__ = [
    "get_user_by_username",
    "get_user_by_id",
    "create_user",
    "UserStore",
]
