"""
Common Liskov Substitution Principle violations.

Each subclass here looks like a reasonable specialisation but breaks a
client written against the base class.
"""
from abc import ABC, abstractmethod
from typing import Any, List

from ..errors import (
    AuthenticationRequiredError, CollectionFullError, UnsupportedOperationError
)


# Example 1: Rectangle-Square problem


class Rectangle:
    def __init__(self, width: int = 0, height: int = 0):
        self.width = width
        self.height = height

    def set_width(self, width: int) -> None:
        self.width = width

    def set_height(self, height: int) -> None:
        self.height = height

    def area(self) -> int:
        return self.width * self.height


class Square(Rectangle):
    """Keeps both sides equal, which breaks independent setters"""

    def set_width(self, width: int) -> None:
        super().set_width(width)
        super().set_height(width)

    def set_height(self, height: int) -> None:
        super().set_height(height)
        super().set_width(height)


def measure_rectangle(rectangle: Rectangle) -> int:
    """Client that assumes width and height vary independently; expects 20"""
    rectangle.set_width(5)
    rectangle.set_height(4)
    return rectangle.area()


# Example 2: Bird problem


class Bird(ABC):
    @abstractmethod
    def fly(self) -> str:
        pass


class Duck(Bird):
    def fly(self) -> str:
        return "Duck flying"


class Ostrich(Bird):
    def fly(self) -> str:
        raise UnsupportedOperationError("Can't fly!")


def try_to_fly(bird: Bird) -> str:
    return bird.fly()


# Example 3: File access problem (strengthened precondition)


class ReadOnlyFile:
    def __init__(self, content: str = "File content"):
        self.content = content

    def read(self) -> str:
        return self.content


class SecuredFile(ReadOnlyFile):
    def __init__(self, content: str = "File content", authenticated: bool = False):
        super().__init__(content)
        self.authenticated = authenticated

    def read(self) -> str:
        if not self.authenticated:
            raise AuthenticationRequiredError("Authentication required")
        return super().read()


def read_file(file: ReadOnlyFile) -> str:
    return file.read()


# Example 4: Collection problem (added limit)


class ArrayCollection:
    def __init__(self):
        self.elements: List[Any] = []

    def add_element(self, element: Any) -> None:
        self.elements.append(element)

    def size(self) -> int:
        return len(self.elements)


class FixedSizeArray(ArrayCollection):
    MAX_SIZE = 10

    def add_element(self, element: Any) -> None:
        if self.size() >= self.MAX_SIZE:
            raise CollectionFullError("Cannot add more elements")
        super().add_element(element)


def add_many(collection: ArrayCollection, count: int) -> int:
    """Client that assumes add_element always succeeds"""
    for i in range(count):
        collection.add_element(i)
    return collection.size()
