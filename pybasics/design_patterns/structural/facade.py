"""
Facade: one simple entry point in front of a subsystem of cooperating parts.
"""

from typing import List

from .._runes import rune_text

BOOT_ADDRESS = "0x00"
BOOT_SECTOR = "BOOT_SECTOR"


class CPU:
    def freeze(self) -> str:
        return "CPU: Freezing..."

    def jump(self, position: str) -> str:
        return "CPU: Jumping to " + position

    def execute(self) -> str:
        return "CPU: Executing..."


class Memory:
    def load(self, position: str, data: str) -> str:
        return "Memory: Loading " + data + " to " + position


class HardDrive:
    def read(self, position: str, size: int) -> str:
        # NOTE: size is rendered as a single character, not as decimal text.
        # Probably unintended; kept so output stays comparable.
        return "HardDrive: Reading data of size " + rune_text(size) + " from " + position


class ComputerFacade:
    def __init__(self):
        self.cpu = CPU()
        self.memory = Memory()
        self.hard_drive = HardDrive()

    def start(self) -> List[str]:
        return [
            self.cpu.freeze(),
            self.memory.load(BOOT_ADDRESS, BOOT_SECTOR),
            self.cpu.jump(BOOT_ADDRESS),
            self.cpu.execute(),
        ]


def main():
    computer = ComputerFacade()
    for step in computer.start():
        print(step)


if __name__ == "__main__":
    main()
