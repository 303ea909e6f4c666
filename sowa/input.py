"""Keyboard and mouse state tracking with named actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from .vector2 import Vector2


class Key(IntEnum):
    UNKNOWN = -1

    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    ZERO = 48
    ONE = 49
    TWO = 50
    THREE = 51
    FOUR = 52
    FIVE = 53
    SIX = 54
    SEVEN = 55
    EIGHT = 56
    NINE = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE_ACCENT = 96
    WORLD_1 = 161
    WORLD_2 = 162

    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    F13 = 302
    F14 = 303
    F15 = 304
    F16 = 305
    F17 = 306
    F18 = 307
    F19 = 308
    F20 = 309
    F21 = 310
    F22 = 311
    F23 = 312
    F24 = 313
    F25 = 314
    KEYPAD_0 = 320
    KEYPAD_1 = 321
    KEYPAD_2 = 322
    KEYPAD_3 = 323
    KEYPAD_4 = 324
    KEYPAD_5 = 325
    KEYPAD_6 = 326
    KEYPAD_7 = 327
    KEYPAD_8 = 328
    KEYPAD_9 = 329
    KEYPAD_DECIMAL = 330
    KEYPAD_DIVIDE = 331
    KEYPAD_MULTIPLY = 332
    KEYPAD_SUBTRACT = 333
    KEYPAD_ADD = 334
    KEYPAD_ENTER = 335
    KEYPAD_EQUAL = 336
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    MENU = 348

    MOUSE1 = 10001
    MOUSE2 = 10002
    MOUSE3 = 10003
    MOUSE4 = 10004
    MOUSE5 = 10005
    MOUSE6 = 10006
    MOUSE7 = 10007
    MOUSE8 = 10008
    MOUSE_LEFT = 10001
    MOUSE_RIGHT = 10002
    MOUSE_MIDDLE = 10003


class KeyAction(IntEnum):
    """Action codes reported by the windowing layer."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class EventType(Enum):
    KEY = 0
    BUTTON = 1
    MOUSE_MOVE = 2
    SCROLL = 3


KeyCode = Union[Key, int]


@dataclass(frozen=True)
class Event:
    """An input event; only the fields that belong to its type are meaningful."""

    type: EventType
    key: KeyCode = Key.UNKNOWN
    action: int = 0
    delta_x: float = 0.0
    delta_y: float = 0.0
    x_offset: float = 0.0
    y_offset: float = 0.0


class _KeyState(Enum):
    UP = 0
    DOWN = 1
    JUST_PRESSED = 2
    JUST_RELEASED = 3


def _as_key(code: int) -> KeyCode:
    try:
        return Key(code)
    except ValueError:
        return code


class InputState:
    """Tracks key states, named actions and the mouse, fed by window callbacks."""

    def __init__(self, poll_events: Optional[Callable[[], None]] = None) -> None:
        self._poll_events = poll_events
        self._actions: Dict[str, List[KeyCode]] = {}
        self._key_states: Dict[int, _KeyState] = {}
        self._callbacks: List[Callable[[Event], None]] = []
        self._cursor_pos = Vector2(0.0, 0.0)
        self._last_scroll = Vector2(0.0, 0.0)

    def poll(self) -> None:
        """Age one-frame key states, reset the scroll and pump window events."""
        for code, state in self._key_states.items():
            if state is _KeyState.JUST_PRESSED:
                self._key_states[code] = _KeyState.DOWN
            elif state is _KeyState.JUST_RELEASED:
                self._key_states[code] = _KeyState.UP
        self._last_scroll = Vector2(0.0, 0.0)
        if self._poll_events is not None:
            self._poll_events()

    def _state(self, key: KeyCode) -> _KeyState:
        return self._key_states.get(int(key), _KeyState.UP)

    def is_key_down(self, key: KeyCode) -> bool:
        return self._state(key) in (_KeyState.DOWN, _KeyState.JUST_PRESSED)

    def is_key_just_pressed(self, key: KeyCode) -> bool:
        return self._state(key) is _KeyState.JUST_PRESSED

    def is_key_just_released(self, key: KeyCode) -> bool:
        return self._state(key) is _KeyState.JUST_RELEASED

    def set_action_keys(self, action_name: str, keys: Iterable[KeyCode]) -> None:
        self._actions[action_name] = list(keys)

    def get_action_keys(self, action_name: str) -> Tuple[KeyCode, ...]:
        return tuple(self._actions.get(action_name, ()))

    def is_action_pressed(self, action_name: str) -> bool:
        return any(self.is_key_down(key) for key in self._actions.get(action_name, ()))

    def is_action_just_pressed(self, action_name: str) -> bool:
        return any(self.is_key_just_pressed(key) for key in self._actions.get(action_name, ()))

    def is_action_just_released(self, action_name: str) -> bool:
        return any(self.is_key_just_released(key) for key in self._actions.get(action_name, ()))

    def get_action_weight(self, negative_action: str, positive_action: str) -> float:
        """-1, 0 or 1 depending on which of the two actions is held."""
        return float(
            int(self.is_action_pressed(positive_action))
            - int(self.is_action_pressed(negative_action))
        )

    def get_action_weight2(
        self, negative_x: str, positive_x: str, negative_y: str, positive_y: str
    ) -> Vector2:
        return Vector2(
            self.get_action_weight(negative_x, positive_x),
            self.get_action_weight(negative_y, positive_y),
        )

    def mouse_position(self) -> Vector2:
        return Vector2(self._cursor_pos.x, self._cursor_pos.y)

    def mouse_scroll_x(self) -> float:
        return self._last_scroll.x

    def mouse_scroll_y(self) -> float:
        return self._last_scroll.y

    def on_event(self, func: Callable[[Event], None]) -> Callable[[Event], None]:
        """Register a listener for every input event; usable as a decorator."""
        self._callbacks.append(func)
        return func

    def _emit(self, event: Event) -> None:
        for callback in list(self._callbacks):
            callback(event)

    def _apply_action(self, code: int, action: int) -> None:
        if action == KeyAction.PRESS:
            self._key_states[code] = _KeyState.JUST_PRESSED
        if action == KeyAction.RELEASE:
            self._key_states[code] = _KeyState.JUST_RELEASED

    def key_callback(self, key: int, action: int) -> None:
        code = int(key)
        self._apply_action(code, action)
        self._emit(Event(EventType.KEY, key=_as_key(code), action=int(action)))

    def mouse_button_callback(self, button: int, action: int) -> None:
        code = int(Key.MOUSE1) + int(button)
        self._apply_action(code, action)
        self._emit(Event(EventType.BUTTON, key=_as_key(code), action=int(action)))

    def mouse_move_callback(self, x: float, y: float) -> None:
        event = Event(
            EventType.MOUSE_MOVE,
            delta_x=self._cursor_pos.x - x,
            delta_y=self._cursor_pos.y - y,
        )
        self._cursor_pos = Vector2(x, y)
        self._emit(event)

    def scroll_callback(self, x_offset: float, y_offset: float) -> None:
        event = Event(EventType.SCROLL, x_offset=x_offset, y_offset=y_offset)
        self._last_scroll = Vector2(x_offset, y_offset)
        self._emit(event)