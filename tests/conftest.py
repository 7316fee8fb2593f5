"""Test configuration and fixtures."""

import os

import logfire

# Keep unit runs quiet and fast; explicit env vars still win
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "storefront-test-secret-at-least-32-bytes")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)
