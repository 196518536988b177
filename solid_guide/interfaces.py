"""
Abstract interfaces and protocols for the guide.
Following SOLID principles, especially Dependency Inversion Principle.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Dict, Any, Protocol
from dataclasses import dataclass, field


VIOLATION = "violation"
COMPLIANT = "compliant"


@dataclass
class DemoResult:
    """Outcome of running one example's client code"""
    principle: str
    example: str
    label: str
    holds: bool
    observations: List[str] = field(default_factory=list)
    expected: Optional[Any] = None
    actual: Optional[Any] = None
    error: Optional[str] = None


class Demonstration(ABC):
    """Runs an example and checks that it behaves as labelled"""

    principle: str = ""
    name: str = ""
    label: str = COMPLIANT

    @abstractmethod
    def run(self) -> DemoResult:
        """Execute the example's client code"""
        pass

    def result(self, holds: bool, observations: Optional[List[str]] = None,
               expected: Any = None, actual: Any = None) -> DemoResult:
        """Build a result stamped with this demonstration's identity"""
        return DemoResult(
            principle=self.principle,
            example=self.name,
            label=self.label,
            holds=holds,
            observations=observations or [],
            expected=expected,
            actual=actual
        )


class ReportTransformer(ABC):
    """Abstract base class for turning results into an output format"""

    @abstractmethod
    def transform(self, results: List[DemoResult]) -> str:
        """Transform demonstration results to output format"""
        pass


class StorageProvider(ABC):
    """Abstract base class for storage operations"""

    @abstractmethod
    def store(self, content: str, key: str, content_type: Optional[str] = None) -> Dict[str, Any]:
        """Store content and return result information"""
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if content exists at key"""
        pass

    @abstractmethod
    def delete(self, key: str) -> Dict[str, Any]:
        """Delete content at key"""
        pass


class ConfigurationProvider(Protocol):
    """Protocol for configuration providers"""

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value"""
        ...

    def validate(self) -> bool:
        """Validate configuration completeness"""
        ...


class Logger(Protocol):
    """Protocol for logging operations"""

    def info(self, message: str) -> None:
        """Log info message"""
        ...

    def error(self, message: str) -> None:
        """Log error message"""
        ...

    def debug(self, message: str) -> None:
        """Log debug message"""
        ...
