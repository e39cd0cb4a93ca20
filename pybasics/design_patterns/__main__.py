import logging
import os

from .behavioral import chain_of_responsibility, observer, strategy
from .creational import builder, factory, singleton
from .structural import adapter, decorator, facade

DEMOS = [
    # Creational
    ("Singleton Pattern", singleton.main),
    ("Factory Pattern", factory.main),
    ("Builder Pattern", builder.main),
    # Structural
    ("Adapter Pattern", adapter.main),
    ("Decorator Pattern", decorator.main),
    ("Facade Pattern", facade.main),
    # Behavioral
    ("Observer Pattern", observer.main),
    ("Strategy Pattern", strategy.main),
    ("Chain of Responsibility Pattern", chain_of_responsibility.main),
]


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("PYBASICS_LOG_LEVEL", "WARNING").upper())

    for title, demo in DEMOS:
        print(f"=== {title} ===")
        demo()
        print()
