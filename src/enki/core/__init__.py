"""Core models and helpers exposed at the package level."""
from .asserts import Assert
from .case import TestCase
from .models import Outcome, TestFunction, TestRecord, Tolerance
from .signals import AssertionFailed, TestFailed, TestPassed, TestPassedEarly, TestSignal

__all__ = [
    "Assert",
    "AssertionFailed",
    "Outcome",
    "TestCase",
    "TestFailed",
    "TestFunction",
    "TestPassed",
    "TestPassedEarly",
    "TestRecord",
    "TestSignal",
    "Tolerance",
]
