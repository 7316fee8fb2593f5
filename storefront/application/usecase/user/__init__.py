"""User use cases."""

from .get_user_details import GetUserDetailsUseCase
from .update_user_details import UpdateUserDetailsUseCase

__all__ = ["GetUserDetailsUseCase", "UpdateUserDetailsUseCase"]
