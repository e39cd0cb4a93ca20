"""
Observer: a subject notifies every registered observer when its state changes.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .._runes import rune_text


class Observer(ABC):
    @abstractmethod
    def update(self, temperature: float) -> None:
        """Receive the new temperature from the subject."""


class WeatherStation:
    def __init__(self):
        self._observers: List[Observer] = []
        self.temperature = 0.0

    def register_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        for i, registered in enumerate(self._observers):
            if registered is observer:
                del self._observers[i]
                break

    def notify_observers(self) -> None:
        for observer in self._observers:
            observer.update(self.temperature)

    def set_temperature(self, temperature: float) -> None:
        self.temperature = temperature
        self.notify_observers()

    def observer_count(self) -> int:
        return len(self._observers)


class TemperatureDisplay(Observer):
    def __init__(self, name: str):
        self.name = name
        self.last_message: Optional[str] = None

    def update(self, temperature: float) -> None:
        self.last_message = self.display(temperature)

    def display(self, temperature: float) -> str:
        # NOTE: the temperature becomes a single character, not decimal text.
        # Probably unintended; kept so output stays comparable.
        return "Display " + self.name + " shows temperature: " + rune_text(int(temperature))


def main():
    weather_station = WeatherStation()
    display1 = TemperatureDisplay("Display 1")
    display2 = TemperatureDisplay("Display 2")

    weather_station.register_observer(display1)
    weather_station.register_observer(display2)
    weather_station.set_temperature(25.0)
    print(f"Observers notified: {weather_station.observer_count()}")
    for display in (display1, display2):
        print(f"{display.name} received update: {display.last_message!r}")

    weather_station.remove_observer(display2)
    weather_station.set_temperature(30.0)
    print(f"Observers after removal: {weather_station.observer_count()}")


if __name__ == "__main__":
    main()
