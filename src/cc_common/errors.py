"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Account/Auth
  3xxx: Ground
  9xxx: System

Booking an already-booked ground and joining a full team are notices,
not errors, so they have no code here.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Account/Auth ---

class ValidationError(AppError):
    def __init__(self, message: str = "Please fill all required fields") -> None:
        super().__init__(1000, message, 422)


class DuplicateEmailError(AppError):
    def __init__(self) -> None:
        super().__init__(1002, "Email already registered", 409)


class InvalidCredentialsError(AppError):
    def __init__(self) -> None:
        super().__init__(1003, "Invalid email or password. Please register first.", 401)


# --- 3xxx: Ground ---

class GroundNotFoundError(AppError):
    def __init__(self, ground_id: str) -> None:
        super().__init__(3001, f"Ground not found: {ground_id}", 404)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
