"""
Liskov Substitution Principle, corrected.

The same four problems as lsp_violations, restructured so every
implementation can stand in for its abstraction.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..errors import AuthenticationRequiredError


# Example 1: Rectangle-Square fix - siblings, not parent and child


class Shape(ABC):

    @abstractmethod
    def area(self) -> int:
        pass


class Rectangle(Shape):
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def set_width(self, width: int) -> None:
        self.width = width

    def set_height(self, height: int) -> None:
        self.height = height

    def area(self) -> int:
        return self.width * self.height


class Square(Shape):
    def __init__(self, side: int):
        self.side = side

    def set_side(self, side: int) -> None:
        self.side = side

    def area(self) -> int:
        return self.side * self.side


def describe_area(shape: Shape) -> str:
    return f"Area: {shape.area()}"


# Example 2: Bird fix - flying is a separate capability


class Animal(ABC):

    @abstractmethod
    def move(self) -> str:
        pass


class Flyable(ABC):

    @abstractmethod
    def fly(self) -> str:
        pass


class Duck(Animal, Flyable):
    def move(self) -> str:
        return "Duck walking"

    def fly(self) -> str:
        return "Duck flying"


class Ostrich(Animal):
    def move(self) -> str:
        return "Ostrich running"


def move_animal(animal: Animal) -> str:
    return animal.move()


def make_fly(flyable: Flyable) -> str:
    return flyable.fly()


# Example 3: File access fix - authentication by composition


class AuthenticationService:
    def __init__(self, authenticated: bool = False):
        self._authenticated = authenticated

    def login(self) -> None:
        self._authenticated = True

    def logout(self) -> None:
        self._authenticated = False

    def is_authenticated(self) -> bool:
        return self._authenticated


class FileReader(ABC):

    @abstractmethod
    def read(self) -> str:
        pass


class BasicFileReader(FileReader):
    def __init__(self, file_path: str, content: str = "File content"):
        self.file_path = file_path
        self._content = content

    def read(self) -> str:
        return self._content


class SecuredFileReader(FileReader):
    """Wraps another reader; callers opt in to the extra precondition"""

    def __init__(self, delegate: FileReader, auth_service: AuthenticationService):
        self.delegate = delegate
        self.auth_service = auth_service

    def read(self) -> str:
        if self.auth_service.is_authenticated():
            return self.delegate.read()
        raise AuthenticationRequiredError("Authentication required")


# Example 4: Collection fix - capacity is part of the contract


class Collection(ABC):

    @abstractmethod
    def add(self, element: Any) -> bool:
        """Add element; returns False when it could not be added"""
        pass

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def is_full(self) -> bool:
        pass


class DynamicArray(Collection):
    def __init__(self):
        self._elements: List[Any] = []

    def add(self, element: Any) -> bool:
        self._elements.append(element)
        return True

    def size(self) -> int:
        return len(self._elements)

    def is_full(self) -> bool:
        return False  # Never full, can always grow


class FixedArray(Collection):
    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError("Capacity cannot be negative")
        self.capacity = capacity
        self._elements: List[Optional[Any]] = []

    def add(self, element: Any) -> bool:
        if self.is_full():
            return False
        self._elements.append(element)
        return True

    def size(self) -> int:
        return len(self._elements)

    def is_full(self) -> bool:
        return self.size() >= self.capacity


def fill_collection(collection: Collection, count: int) -> int:
    """Adds up to count elements, respecting is_full; returns how many went in"""
    added = 0
    for i in range(count):
        if collection.is_full():
            break
        if collection.add(i):
            added += 1
    return added
