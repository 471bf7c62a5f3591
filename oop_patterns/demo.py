#!/usr/bin/env python3
"""
OOP Patterns Demo
Runs the shape drawing and phone factory examples
"""

import sys

from oop_patterns.phones import MANUFACTURERS
from oop_patterns.shapes import DrawManager


def run_shapes_demo():
    """Draw the manager's shapes"""
    manager = DrawManager()
    manager.draw_shapes()


def run_phones_demo():
    """Build both phone families with every manufacturer's factory"""
    for manufacturer, factory_cls in MANUFACTURERS:
        factory = factory_cls()
        smartphone = factory.create_smartphone(f"{manufacturer} Smartphone")
        basic_phone = factory.create_basic_phone(f"{manufacturer} Basic Phone")

        print(f"Manufacturer: {manufacturer}")
        print(f"Smarphone: {smartphone.get_name()}")
        print(f"Basic phone: {basic_phone.get_name()}")


def main():
    run_shapes_demo()
    run_phones_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
