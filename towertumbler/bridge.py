"""Event queue between the host page and the game."""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass
from typing import Union

from towertumbler.tilt import TiltInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeviceOrientation:
    """One orientation reading from the device."""

    alpha: float  # Z-axis rotation
    beta: float  # front-to-back tilt
    gamma: float  # left-to-right tilt
    timestamp: float


@dataclass(frozen=True)
class PermissionStatus:
    """State of the motion-sensor permission."""

    granted: bool = False
    requested: bool = False
    available: bool = False


@dataclass(frozen=True)
class GameStateRequest:
    state: str


@dataclass(frozen=True)
class GameStateResponse:
    state: str
    data: str


BridgeEvent = Union[DeviceOrientation, PermissionStatus, GameStateRequest, GameStateResponse]


class EventBridge:
    """A bounded, thread-safe FIFO of bridge events; the oldest is dropped when full."""

    def __init__(self, max_queue_size: int = 120) -> None:
        self._queue: deque[BridgeEvent] = deque(maxlen=max_queue_size)
        self._lock = threading.Lock()
        self.permission_status = PermissionStatus()

    @property
    def max_queue_size(self) -> int:
        return self._queue.maxlen or 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._queue)

    def push_event(self, event: BridgeEvent) -> None:
        with self._lock:
            self._queue.append(event)

    def pop_event(self) -> BridgeEvent | None:
        """Remove and return the oldest event, or None when empty."""
        with self._lock:
            return self._queue.popleft() if self._queue else None

    def set_permission_status(self, status: PermissionStatus) -> None:
        """Store the status and queue it as an event."""
        self.permission_status = status
        self.push_event(status)


_shared_bridge = EventBridge()


def _resolve(bridge: EventBridge | None) -> EventBridge:
    return _shared_bridge if bridge is None else bridge


def push_device_orientation(
    alpha: float,
    beta: float,
    gamma: float,
    timestamp: float,
    bridge: EventBridge | None = None,
) -> None:
    """Queue an orientation reading."""
    _resolve(bridge).push_event(DeviceOrientation(alpha, beta, gamma, timestamp))


def set_permission_status(
    granted: bool,
    requested: bool,
    available: bool,
    bridge: EventBridge | None = None,
) -> None:
    """Record a new permission status."""
    _resolve(bridge).set_permission_status(PermissionStatus(granted, requested, available))


def request_game_state(state: str, bridge: EventBridge | None = None) -> str:
    """Queue a game state request; the response arrives later as an event."""
    _resolve(bridge).push_event(GameStateRequest(state))
    return ""


class BridgeState:
    """Game-side view of the bridge: latest orientation and permission."""

    def __init__(self, bridge: EventBridge | None = None) -> None:
        self.bridge = _resolve(bridge)
        self.last_orientation: DeviceOrientation | None = None
        self.permission_status = PermissionStatus()
        self.events_processed = 0

    def process_events(self) -> list[BridgeEvent]:
        """Drain the queue, tracking the latest orientation and permission."""
        events: list[BridgeEvent] = []
        while (event := self.bridge.pop_event()) is not None:
            if isinstance(event, DeviceOrientation):
                self.last_orientation = event
            elif isinstance(event, PermissionStatus):
                self.permission_status = event
            events.append(event)
            self.events_processed += 1
        return events

    def send_game_state_response(self, state: str, data: str) -> None:
        self.bridge.push_event(GameStateResponse(state, data))


def process_bridge_events(state: BridgeState, tilt: TiltInput) -> None:
    """Apply all pending bridge events to the tilt input."""
    for event in state.process_events():
        if isinstance(event, DeviceOrientation):
            tilt.update_orientation(event.alpha, event.beta, event.gamma, event.timestamp)
            tilt.enabled = state.permission_status.granted
            if state.events_processed % 60 == 0:
                logger.info("Device orientation: %s", tilt.debug_info())
        elif isinstance(event, PermissionStatus):
            logger.info(
                "Permission status changed: granted=%s, available=%s",
                str(event.granted).lower(),
                str(event.available).lower(),
            )
            tilt.enabled = event.granted
        elif isinstance(event, GameStateRequest):
            logger.info("Game state requested: %s", event.state)