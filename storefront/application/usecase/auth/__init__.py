"""Authentication use cases."""

from .federated_login import FederatedLoginUseCase
from .login import LoginUseCase
from .signup import SignupUseCase

__all__ = ["FederatedLoginUseCase", "LoginUseCase", "SignupUseCase"]
