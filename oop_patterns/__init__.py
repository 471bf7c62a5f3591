"""Object-oriented design pattern examples: polymorphic shapes and an abstract phone factory"""

__version__ = "1.0.0"
