"""
Abstract Factory example
Each manufacturer factory builds its own smartphone and basic phone
"""

from abc import ABC, abstractmethod
from typing import Tuple, Type


class Phone(ABC):
    @abstractmethod
    def get_name(self) -> str:
        """Return the display name given at construction"""


class Smartphone(Phone):
    """Abstract product: smartphone family"""


class BasicPhone(Phone):
    """Abstract product: basic phone family"""


class NokiaSmartphone(Smartphone):
    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name


class NokiaBasicPhone(BasicPhone):
    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name


class SamsungSmartphone(Smartphone):
    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name


class SamsungBasicPhone(BasicPhone):
    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name


class HTCSmartphone(Smartphone):
    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name


class HTCBasicPhone(BasicPhone):
    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name


class PhoneFactory(ABC):
    """Creates one product of each family for a single manufacturer"""

    @abstractmethod
    def create_smartphone(self, name: str) -> Smartphone:
        pass

    @abstractmethod
    def create_basic_phone(self, name: str) -> BasicPhone:
        pass


class NokiaFactory(PhoneFactory):
    def create_smartphone(self, name: str) -> Smartphone:
        return NokiaSmartphone(name)

    def create_basic_phone(self, name: str) -> BasicPhone:
        return NokiaBasicPhone(name)


class SamsungFactory(PhoneFactory):
    def create_smartphone(self, name: str) -> Smartphone:
        return SamsungSmartphone(name)

    def create_basic_phone(self, name: str) -> BasicPhone:
        return SamsungBasicPhone(name)


class HTCFactory(PhoneFactory):
    def create_smartphone(self, name: str) -> Smartphone:
        return HTCSmartphone(name)

    def create_basic_phone(self, name: str) -> BasicPhone:
        return HTCBasicPhone(name)


# Demo order
MANUFACTURERS: Tuple[Tuple[str, Type[PhoneFactory]], ...] = (
    ("Nokia", NokiaFactory),
    ("Samsung", SamsungFactory),
    ("HTC", HTCFactory),
)

