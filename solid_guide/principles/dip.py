"""
Dependency Inversion Principle examples.

High-level modules should not depend on low-level modules; both depend on
abstractions. DIP does not forbid creating concrete objects: a concrete
implementation may build its own private collaborators, as long as the
high-level module only sees the abstraction.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from ..interfaces import Logger
from ..logging import log_info


QUERY = "SELECT * FROM data"


# Bad example - violates DIP


class MySQLDatabase:
    def query(self, sql: str) -> str:
        return "Data from MySQL"


class DataReader:
    """Hard-wires its own database; cannot be swapped or faked"""

    def __init__(self):
        self.database = MySQLDatabase()

    def read_data(self) -> str:
        return self.database.query(QUERY)


# Good example - follows DIP


class Database(ABC):

    @abstractmethod
    def query(self, sql: str) -> str:
        pass


class MySQLDatabaseImpl(Database):
    def query(self, sql: str) -> str:
        return "Data from MySQL"


class PostgreSQLDatabaseImpl(Database):
    def query(self, sql: str) -> str:
        return "Data from PostgreSQL"


class ImprovedDataReader:
    def __init__(self, database: Database):
        self.database = database

    def read_data(self) -> str:
        return self.database.query(QUERY)


# Storage: concrete services own their details


class CloudProvider:
    def __init__(self):
        self.objects: List[str] = []

    def store(self, data: str) -> None:
        self.objects.append(data)


class FileSystem:
    def __init__(self):
        self.files: Dict[str, str] = {}

    def write_to_file(self, data: str, name: str = "data.txt") -> None:
        self.files[name] = self.files.get(name, "") + data + "\n"


class StorageService(ABC):

    @abstractmethod
    def save(self, data: str) -> None:
        pass


class CloudStorageService(StorageService):
    def __init__(self):
        # Private to this implementation
        self.provider = CloudProvider()

    def save(self, data: str) -> None:
        self.provider.store(data)


class LocalStorageService(StorageService):
    def __init__(self):
        self.file_system = FileSystem()

    def save(self, data: str) -> None:
        self.file_system.write_to_file(data)


class DataManager:
    def __init__(self, storage: StorageService):
        self.storage = storage

    def save_data(self, data: str) -> None:
        self.storage.save(data)


# Notifications


class MessageService(ABC):

    @abstractmethod
    def send_message(self, message: str, recipient: str) -> str:
        pass


class EmailService(MessageService):
    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger
        self.sent: List[Tuple[str, str]] = []

    def send_message(self, message: str, recipient: str) -> str:
        line = f"Sending email to {recipient}: {message}"
        self.sent.append((recipient, message))
        log_info(self.logger, line)
        return line


class SMSService(MessageService):
    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger
        self.sent: List[Tuple[str, str]] = []

    def send_message(self, message: str, recipient: str) -> str:
        line = f"Sending SMS to {recipient}: {message}"
        self.sent.append((recipient, message))
        log_info(self.logger, line)
        return line


class NotificationService:
    def __init__(self, message_service: MessageService):
        self.message_service = message_service

    def notify(self, recipient: str, message: str) -> str:
        if message is None or not message.strip():
            raise ValueError("Message cannot be empty")
        return self.message_service.send_message(message, recipient)


# Pragmatic exception: a stable, specific collaborator may be created directly


class SimpleLogger:
    def __init__(self):
        self.file_system = FileSystem()

    def log(self, message: str) -> None:
        self.file_system.write_to_file(message, name="app.log")
