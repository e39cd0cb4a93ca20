"""
Builder: assemble a complex object step by step through a fluent interface;
a Director knows the recipes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Computer:
    cpu: str = ""
    ram: int = 0
    storage: int = 0
    gpu: str = ""
    bluetooth: bool = False


class ComputerBuilder(ABC):
    """Building steps. Every setter returns the builder so calls chain."""

    @abstractmethod
    def set_cpu(self, cpu: str) -> "ComputerBuilder":
        ...

    @abstractmethod
    def set_ram(self, ram: int) -> "ComputerBuilder":
        ...

    @abstractmethod
    def set_storage(self, storage: int) -> "ComputerBuilder":
        ...

    @abstractmethod
    def set_gpu(self, gpu: str) -> "ComputerBuilder":
        ...

    @abstractmethod
    def set_bluetooth(self, has_bluetooth: bool) -> "ComputerBuilder":
        ...

    @abstractmethod
    def build(self) -> Computer:
        """Return the finished product."""


class ConcreteComputerBuilder(ComputerBuilder):
    def __init__(self):
        self._computer = Computer()

    def set_cpu(self, cpu: str) -> "ConcreteComputerBuilder":
        self._computer.cpu = cpu
        return self

    def set_ram(self, ram: int) -> "ConcreteComputerBuilder":
        self._computer.ram = ram
        return self

    def set_storage(self, storage: int) -> "ConcreteComputerBuilder":
        self._computer.storage = storage
        return self

    def set_gpu(self, gpu: str) -> "ConcreteComputerBuilder":
        self._computer.gpu = gpu
        return self

    def set_bluetooth(self, has_bluetooth: bool) -> "ConcreteComputerBuilder":
        self._computer.bluetooth = has_bluetooth
        return self

    def build(self) -> Computer:
        # Hand over the product and start a fresh one, so a builder reused by
        # the Director never mutates a computer it already returned
        computer, self._computer = self._computer, Computer()
        return computer


class Director:
    def __init__(self, builder: ComputerBuilder):
        self._builder = builder

    def build_gaming_pc(self) -> Computer:
        return (
            self._builder
            .set_cpu("Intel i9")
            .set_ram(32)
            .set_storage(2000)
            .set_gpu("RTX 4080")
            .set_bluetooth(True)
            .build()
        )

    def build_office_pc(self) -> Computer:
        return (
            self._builder
            .set_cpu("Intel i5")
            .set_ram(16)
            .set_storage(512)
            .set_gpu("Integrated")
            .set_bluetooth(True)
            .build()
        )


def main():
    director = Director(ConcreteComputerBuilder())

    gaming_pc = director.build_gaming_pc()
    office_pc = director.build_office_pc()

    print(f"Gaming PC: {gaming_pc}")
    print(f"Office PC: {office_pc}")


if __name__ == "__main__":
    main()
