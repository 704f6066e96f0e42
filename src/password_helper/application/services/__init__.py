"""Application services for password_helper."""

from password_helper.application.services.password_service import PasswordService

__all__ = ["PasswordService"]
