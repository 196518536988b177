"""
Interface Segregation Principle examples.

Clients should not be forced to depend upon interfaces that they do not use.
Prefer several small role interfaces to one large one.
"""
from abc import ABC, abstractmethod
from typing import List

from ..errors import UnsupportedOperationError


# Bad example - violates ISP


class MultiFunctionPrinter(ABC):

    @abstractmethod
    def print(self) -> str:
        pass

    @abstractmethod
    def scan(self) -> str:
        pass

    @abstractmethod
    def fax(self) -> str:
        pass

    @abstractmethod
    def photocopy(self) -> str:
        pass

    @abstractmethod
    def color_print(self) -> str:
        pass

    @abstractmethod
    def staple(self) -> str:
        pass


class BasicPrinter(MultiFunctionPrinter):
    """Forced to implement five operations it cannot perform"""

    def print(self) -> str:
        return "Printing"

    def scan(self) -> str:
        raise UnsupportedOperationError("scan")

    def fax(self) -> str:
        raise UnsupportedOperationError("fax")

    def photocopy(self) -> str:
        raise UnsupportedOperationError("photocopy")

    def color_print(self) -> str:
        raise UnsupportedOperationError("color_print")

    def staple(self) -> str:
        raise UnsupportedOperationError("staple")


# Good example - follows ISP


class BasicPrinting(ABC):

    @abstractmethod
    def print(self) -> str:
        pass


class Scanning(ABC):

    @abstractmethod
    def scan(self) -> str:
        pass


class Faxing(ABC):

    @abstractmethod
    def fax(self) -> str:
        pass


class AdvancedPrinting(ABC):

    @abstractmethod
    def color_print(self) -> str:
        pass

    @abstractmethod
    def staple(self) -> str:
        pass


class SimpleHomePrinter(BasicPrinting):
    def print(self) -> str:
        return "Printing"


class OfficePrinter(BasicPrinting, Scanning):
    def print(self) -> str:
        return "Printing"

    def scan(self) -> str:
        return "Scanning"


class EnterpriseMultiFunction(BasicPrinting, Scanning, Faxing, AdvancedPrinting):
    def print(self) -> str:
        return "Printing"

    def scan(self) -> str:
        return "Scanning"

    def fax(self) -> str:
        return "Faxing"

    def color_print(self) -> str:
        return "Color printing"

    def staple(self) -> str:
        return "Stapling"


class PhotocopierDevice(Scanning, BasicPrinting):
    """Combines two role interfaces into a higher-level operation"""

    def scan(self) -> str:
        return "Scanning"

    def print(self) -> str:
        return "Printing"

    def photocopy(self) -> List[str]:
        return [self.scan(), self.print()]


# Worker example


class Workable(ABC):

    @abstractmethod
    def work(self) -> str:
        pass


class Eatable(ABC):

    @abstractmethod
    def eat(self) -> str:
        pass


class Payable(ABC):

    @abstractmethod
    def get_paid(self) -> str:
        pass


class Human(Workable, Eatable, Payable):
    def work(self) -> str:
        return "Human working"

    def eat(self) -> str:
        return "Human eating"

    def get_paid(self) -> str:
        return "Human paid"


class Robot(Workable):
    # Robot doesn't need to eat or get paid
    def work(self) -> str:
        return "Robot working"


ROLE_INTERFACES = (
    BasicPrinting, Scanning, Faxing, AdvancedPrinting, Workable, Eatable, Payable
)


def supported_capabilities(device: object) -> List[str]:
    """Names of the role interfaces the object implements"""
    return [role.__name__ for role in ROLE_INTERFACES if isinstance(device, role)]
