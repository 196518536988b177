"""
Single Responsibility Principle examples.

A class should have one reason to change. UserManager mixes validation,
persistence, e-mail and logging; the split version gives each concern its
own class and lets UserService coordinate them.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from ..errors import InvalidUserError, RepositoryError
from ..interfaces import Logger
from ..logging import log_info


@dataclass
class User:
    name: str
    email: Optional[str] = None
    password: Optional[str] = None


# Bad example - violates SRP


class UserManager:
    """Registers users while also validating, storing, mailing and logging"""

    def __init__(self, logger: Optional[Logger] = None):
        self.users: Dict[str, User] = {}
        self.sent_emails: List[str] = []
        self.logger = logger

    def register_user(self, user: User) -> None:
        # 1. Validation
        if user is None or not user.email or not user.password:
            raise InvalidUserError("Invalid user data")
        # 2. Database operations
        self.users[user.email] = user
        # 3. Email sending
        self.sent_emails.append(f"Dear {user.name},\nWelcome aboard!")
        # 4. Logging
        log_info(self.logger, f"[{datetime.now().isoformat()}] User registered: {user.email}")


# Good example - follows SRP


class UserValidator:
    """Knows the validation rules and nothing else"""

    def validate(self, user: Optional[User]) -> bool:
        return (
            user is not None
            and user.email is not None
            and user.password is not None
        )


class UserRepository:
    """Persists users, here in memory"""

    def __init__(self):
        self._users: Dict[str, User] = {}

    def save(self, user: User) -> None:
        if not user.email:
            raise RepositoryError("Failed to save user: missing email key")
        self._users[user.email] = user

    def find(self, email: str) -> Optional[User]:
        return self._users.get(email)

    def count(self) -> int:
        return len(self._users)


@dataclass
class Email:
    recipient: str
    subject: str
    body: str


class WelcomeEmailService:
    """Composes and sends the welcome e-mail"""

    SUBJECT = "Welcome to our platform"

    def __init__(self):
        self.outbox: List[Email] = []

    def send_welcome_email(self, user: User) -> Email:
        email = Email(
            recipient=user.email,
            subject=self.SUBJECT,
            body=f"Dear {user.name},\nWelcome aboard!"
        )
        self.outbox.append(email)
        return email


class ActivityLogger:
    """Formats activity lines and hands them to the project logger"""

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger
        self.lines: List[str] = []

    def log(self, message: str) -> str:
        line = f"[{datetime.now().isoformat()}] {message}"
        self.lines.append(line)
        log_info(self.logger, line)
        return line


class UserService:
    """Coordinates registration; every concern is delegated"""

    def __init__(self, validator: UserValidator, repository: UserRepository,
                 email_service: WelcomeEmailService, activity_logger: ActivityLogger):
        self.validator = validator
        self.repository = repository
        self.email_service = email_service
        self.activity_logger = activity_logger

    def register_user(self, user: User) -> None:
        if not self.validator.validate(user):
            raise InvalidUserError("Invalid user data")

        self.repository.save(user)
        self.email_service.send_welcome_email(user)
        self.activity_logger.log(f"User registered: {user.email}")


def build_user_service(logger: Optional[Logger] = None) -> UserService:
    return UserService(
        UserValidator(),
        UserRepository(),
        WelcomeEmailService(),
        ActivityLogger(logger)
    )
