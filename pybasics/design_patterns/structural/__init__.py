"""Structural patterns: adapter, decorator, facade."""

from .adapter import Adaptee, Adapter, Target
from .decorator import Coffee, CoffeeDecorator, MilkDecorator, SimpleCoffee, SugarDecorator, WhipDecorator
from .facade import CPU, ComputerFacade, HardDrive, Memory

__all__ = [
    "Target",
    "Adaptee",
    "Adapter",
    "Coffee",
    "SimpleCoffee",
    "CoffeeDecorator",
    "MilkDecorator",
    "SugarDecorator",
    "WhipDecorator",
    "CPU",
    "Memory",
    "HardDrive",
    "ComputerFacade",
]
