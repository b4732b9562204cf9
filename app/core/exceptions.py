"""
Доменные исключения приложения.

Сервисы и репозитории бросают их, а обработчики в app.main превращают
в JSON-ответ вида {"success": false, "msg": ...} с нужным HTTP-статусом.
"""

from typing import List, Optional


class AppError(Exception):
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[str]] = None):
        self.message = message or self.default_message
        self.errors = errors or []
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Validation Error"


class ConflictError(AppError):
    """Нарушение уникальности (email и т.п.)."""
    status_code = 400
    default_message = "Duplicate Entry"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class AuthenticationError(AppError):
    status_code = 401
    default_message = "User not authorized"


class PermissionDeniedError(AppError):
    status_code = 403
    default_message = "Not enough permissions"


class PersistenceError(AppError):
    status_code = 500
    default_message = "Server Error"


def validation_error_from(exc) -> ValidationError:
    """pydantic.ValidationError -> ValidationError со списком сообщений по полям."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "").replace("Value error, ", "")
        errors.append(f"{field}: {message}" if field else message)
    return ValidationError("Validation Error", errors=errors)
