# Lightweight FSM implementation derived from 'transitions' library
# https://github.com/pytransitions/transitions

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from graphviz import Digraph

logger = logging.getLogger(__name__)

Callback = Callable[["EventData"], Any]
Condition = Callable[["EventData"], bool]
Callbacks = Optional[Callable | Sequence[Callable]]

StateName = str | Enum


def _key(name: StateName) -> str:
    return name.name if isinstance(name, Enum) else str(name)


def _as_list(callbacks: Callbacks) -> List[Callable]:
    if callbacks is None:
        return []
    if callable(callbacks):
        return [callbacks]
    return list(callbacks)


class MachineError(RuntimeError):
    """Raised when the state machine fails to transition."""


class State:
    """A named state; ``value`` is the enum value, or the name for plain strings."""

    def __init__(self, name: StateName, *, on_enter: Callbacks = None, on_exit: Callbacks = None):
        self._name = name
        self.on_enter: List[Callback] = _as_list(on_enter)
        self.on_exit: List[Callback] = _as_list(on_exit)

    @property
    def name(self) -> str:
        return _key(self._name)

    @property
    def value(self) -> Any:
        return self._name.value if isinstance(self._name, Enum) else self._name

    def __repr__(self) -> str:
        return f"State({self.value!r})"


@dataclass
class EventData:
    """What callbacks and conditions see of the transition in progress."""

    machine: Machine
    trigger: Optional[str] = None
    source: Optional[State] = None
    dest: Optional[State] = None
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Transition:
    source: str
    dest: str
    conditions: List[Condition] = field(default_factory=list)
    after: List[Callback] = field(default_factory=list)

    def allows(self, data: EventData) -> bool:
        return all(condition(data) for condition in self.conditions)


class Machine:
    """Deterministic finite state machine with auto-generated triggers.

    Each trigger name becomes a method on the machine, so a transition added
    with ``trigger="play"`` is fired by ``machine.play()``. Firing a trigger
    that has no transition from the current state, or whose conditions fail,
    returns ``False`` and leaves the state unchanged. Entering a state from
    inside an enter/exit callback raises :class:`MachineError`.
    """

    wildcard_symbol = "*"

    def __init__(
        self,
        states: Optional[Sequence[StateName | State]] = None,
        initial_state: Optional[StateName] = None
    ) -> None:
        self._states: Dict[str, State] = {}
        self._transitions: Dict[str, List[Transition]] = {}
        self._current_state: Optional[State] = None
        self._in_transition = False

        for state in states or ():
            self.add_state(state)
        if initial_state is not None:
            if _key(initial_state) not in self._states:
                raise ValueError("Initial state must be in the provided list of states.")
            self.set_state(initial_state)

    @property
    def current_state(self) -> Optional[State]:
        return self._current_state

    def is_state(self, name: StateName) -> bool:
        return self._current_state is not None and self._current_state.name == _key(name)

    def add_state(
        self,
        state: StateName | State,
        *,
        on_enter: Callbacks = None,
        on_exit: Callbacks = None,
    ) -> State:
        if not isinstance(state, State):
            state = State(state, on_enter=on_enter, on_exit=on_exit)
        if state.name in self._states:
            raise ValueError(f"State '{state.name}' already registered.")
        self._states[state.name] = state
        return state

    def get_state(self, name: StateName) -> State:
        try:
            return self._states[_key(name)]
        except KeyError:
            raise ValueError(f"State '{_key(name)}' not found in machine states.") from None

    def set_state(self, name: StateName) -> None:
        dest = self.get_state(name)
        self._change_state(EventData(self, source=self._current_state, dest=dest))

    def add_transition(
        self,
        sources: StateName | Sequence[StateName],
        dest: StateName,
        trigger: str,
        *,
        conditions: Callbacks = None,
        after: Callbacks = None,
    ) -> None:
        if isinstance(sources, (list, tuple)):
            source_names = [_key(source) for source in sources]
        else:
            source_names = [_key(sources)]
        for name in source_names + [_key(dest)]:
            if name != self.wildcard_symbol and name not in self._states:
                raise ValueError(f"Unknown state '{name}'.")

        transitions = self._ensure_trigger(trigger)
        for source in source_names:
            transitions.append(Transition(
                source=source,
                dest=_key(dest),
                conditions=_as_list(conditions),
                after=_as_list(after),
            ))

    def trigger(self, name: str, *args: Any, **kwargs: Any) -> bool:
        current = self._current_state
        if current is None or name not in self._transitions:
            return False

        for transition in self._transitions[name]:
            if transition.source not in (current.name, self.wildcard_symbol):
                continue
            data = EventData(
                self, name, current, self._states[transition.dest], args, dict(kwargs)
            )
            if not transition.allows(data):
                continue
            self._change_state(data)
            for callback in transition.after:
                callback(data)
            return True
        return False

    def to_graphviz(self) -> Digraph:
        g = Digraph()
        for state in self._states.values():
            shape = "doublecircle" if state is self._current_state else "circle"
            g.node(state.name, label=str(state.value), shape=shape)

        for trigger, transitions in self._transitions.items():
            for tr in transitions:
                if tr.source == self.wildcard_symbol:
                    sources = list(self._states)
                else:
                    sources = [tr.source]
                for source in sources:
                    g.edge(source, tr.dest, label=trigger)
        return g

    def _ensure_trigger(self, name: str) -> List[Transition]:
        if not name.isidentifier():
            raise ValueError(f"Trigger name '{name}' is not a valid identifier.")
        if name not in self._transitions:
            self._transitions[name] = []

            def fire(*args: Any, _name: str = name, **kwargs: Any) -> bool:
                return self.trigger(_name, *args, **kwargs)
            setattr(self, name, fire)
        return self._transitions[name]

    def _change_state(self, data: EventData) -> None:
        previous, dest = self._current_state, data.dest
        if previous is dest:
            return
        if self._in_transition:
            raise MachineError(f"Cannot enter '{dest.name}' while a transition is running.")

        self._in_transition = True
        try:
            if previous is not None:
                for callback in previous.on_exit:
                    callback(data)
            self._current_state = dest
            logger.debug("Transition %s -> %s", previous and previous.name, dest.name)
            for callback in dest.on_enter:
                callback(data)
        finally:
            self._in_transition = False
