"""Unit tests for the weather station observer."""

from typing import List

import pytest

from pybasics.design_patterns.behavioral.observer import Observer, TemperatureDisplay, WeatherStation, main


class RecordingObserver(Observer):
    def __init__(self):
        self.received: List[float] = []

    def update(self, temperature: float) -> None:
        self.received.append(temperature)


class TestWeatherStation:
    """Tests for register/remove/notify."""

    def test_notifies_every_registered_observer(self) -> None:
        station = WeatherStation()
        first, second = RecordingObserver(), RecordingObserver()
        station.register_observer(first)
        station.register_observer(second)

        station.set_temperature(21.5)

        assert first.received == [21.5]
        assert second.received == [21.5]

    def test_removed_observer_is_not_notified(self) -> None:
        """Test that removal stops further updates."""
        station = WeatherStation()
        kept, removed = RecordingObserver(), RecordingObserver()
        station.register_observer(kept)
        station.register_observer(removed)

        station.remove_observer(removed)
        station.set_temperature(30.0)

        assert kept.received == [30.0]
        assert removed.received == []
        assert station.observer_count() == 1

    def test_remove_unknown_observer_is_noop(self) -> None:
        station = WeatherStation()
        station.register_observer(RecordingObserver())

        station.remove_observer(RecordingObserver())

        assert station.observer_count() == 1

    def test_notification_order(self) -> None:
        """Test that observers are notified in registration order."""
        station = WeatherStation()
        calls = []

        class Named(Observer):
            def __init__(self, name):
                self.name = name

            def update(self, temperature: float) -> None:
                calls.append(self.name)

        for name in ("a", "b", "c"):
            station.register_observer(Named(name))
        station.notify_observers()

        assert calls == ["a", "b", "c"]


class TestTemperatureDisplay:
    """Tests for the display observer."""

    def test_update_stores_message(self) -> None:
        """Test that the temperature is rendered as a single character."""
        display = TemperatureDisplay("Lobby")

        display.update(65.0)

        assert display.last_message == "Display Lobby shows temperature: A"


def test_main_output(capsys) -> None:
    """Test the demo output."""
    main()
    out = capsys.readouterr().out

    assert "Observers notified: 2" in out
    assert "Observers after removal: 1" in out


class TestTemperatureCharacter:
    """Tests for temperatures that are not valid code points."""

    @pytest.mark.parametrize("temperature", [-1.0, float(0xD800), float(0x110000)])
    def test_invalid_code_point_becomes_replacement_character(self, temperature) -> None:
        station = WeatherStation()
        display = TemperatureDisplay("Roof")
        station.register_observer(display)

        station.set_temperature(temperature)

        assert display.last_message == "Display Roof shows temperature: \ufffd"
        display.last_message.encode("utf-8")
