"""UI state store: a pure reducer plus a dispatching container."""

from collections.abc import Callable
from dataclasses import replace

from weathervista.models.state import (
    ConditionsReceived,
    ForecastReceived,
    InputRejected,
    RecentCitiesChanged,
    SearchFailed,
    SearchFinished,
    SearchStarted,
    UIEvent,
    UIState,
    UnitToggled,
)

Listener = Callable[[UIState, UIEvent], None]


def reduce(state: UIState, event: UIEvent) -> UIState:
    """Return the state that results from applying one event."""
    if isinstance(event, SearchStarted):
        return replace(state, loading=True, error=None)
    if isinstance(event, InputRejected):
        return replace(state, error=event.message)
    if isinstance(event, ConditionsReceived):
        # A new location invalidates whatever forecast was shown before
        return replace(state, conditions=event.conditions, forecast=None)
    if isinstance(event, ForecastReceived):
        return replace(state, forecast=event.forecast)
    if isinstance(event, SearchFailed):
        return replace(state, error=event.message, conditions=None, forecast=None)
    if isinstance(event, SearchFinished):
        return replace(state, loading=False)
    if isinstance(event, UnitToggled):
        return replace(state, is_celsius=not state.is_celsius)
    if isinstance(event, RecentCitiesChanged):
        return replace(state, recent_cities=tuple(event.cities))
    raise TypeError(f"Unknown UI event: {event!r}")


class Store:
    def __init__(self, initial: UIState | None = None):
        self._state = initial or UIState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> UIState:
        return self._state

    def dispatch(self, event: UIEvent) -> UIState:
        self._state = reduce(self._state, event)
        for listener in self._listeners:
            listener(self._state, event)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)
