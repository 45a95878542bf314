"""Getters and setters for the ICCCM window properties.

Properties whose values are more than a plain string or number are
organised into dataclasses (``NormalHints``, ``Hints`` and so on). For
``WM_NORMAL_HINTS`` and ``WM_HINTS`` the ``flags`` field is a bit mask
saying which of the other values are meaningful; set it accordingly.

The ``WM_DELETE_WINDOW`` and ``WM_TAKE_FOCUS`` protocols are recognised
by ``is_delete_protocol`` and ``is_focus_protocol``.
"""

from __future__ import annotations

import enum
from dataclasses import astuple, dataclass
from typing import Iterable

from wmhints.connection import (
    ClientMessage,
    PropertyError,
    XConnection,
    change_prop,
    change_prop32,
    prop_val_nums,
    prop_val_str,
    prop_val_strs,
    prop_val_atoms,
    prop_val_window,
    prop_val_windows,
    str_to_atoms,
)

GRAVITY_NORTH_WEST = 1


class Hint(enum.IntFlag):
    """Bits of the ``flags`` field in ``WM_HINTS``."""

    INPUT = 1 << 0
    STATE = 1 << 1
    ICON_PIXMAP = 1 << 2
    ICON_WINDOW = 1 << 3
    ICON_POSITION = 1 << 4
    ICON_MASK = 1 << 5
    WINDOW_GROUP = 1 << 6
    MESSAGE = 1 << 7
    URGENCY = 1 << 8


class SizeHint(enum.IntFlag):
    """Bits of the ``flags`` field in ``WM_NORMAL_HINTS``."""

    US_POSITION = 1 << 0
    US_SIZE = 1 << 1
    P_POSITION = 1 << 2
    P_SIZE = 1 << 3
    P_MIN_SIZE = 1 << 4
    P_MAX_SIZE = 1 << 5
    P_RESIZE_INC = 1 << 6
    P_ASPECT = 1 << 7
    P_BASE_SIZE = 1 << 8
    P_WIN_GRAVITY = 1 << 9


class WindowState(enum.IntEnum):
    """Values of the state held in ``WM_STATE``."""

    WITHDRAWN = 0
    NORMAL = 1
    ZOOMED = 2
    ICONIC = 3
    INACTIVE = 4


@dataclass
class NormalHints:
    """The contents of ``WM_NORMAL_HINTS``, in wire order."""

    flags: int = 0
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    min_width: int = 0
    min_height: int = 0
    max_width: int = 0
    max_height: int = 0
    width_inc: int = 0
    height_inc: int = 0
    min_aspect_num: int = 0
    min_aspect_den: int = 0
    max_aspect_num: int = 0
    max_aspect_den: int = 0
    base_width: int = 0
    base_height: int = 0
    win_gravity: int = 0


@dataclass
class Hints:
    """The contents of ``WM_HINTS``, in wire order."""

    flags: int = 0
    input: int = 0
    initial_state: int = 0
    icon_pixmap: int = 0
    icon_window: int = 0
    icon_x: int = 0
    icon_y: int = 0
    icon_mask: int = 0
    window_group: int = 0


@dataclass
class WmClass:
    """The instance and class names of a window."""

    instance: str
    class_name: str


@dataclass
class WmState:
    """The contents of ``WM_STATE``: a state and an icon window."""

    state: int
    icon: int = 0


@dataclass
class IconSize:
    """The contents of ``WM_ICON_SIZE``."""

    min_width: int = 0
    min_height: int = 0
    max_width: int = 0
    max_height: int = 0
    width_inc: int = 0
    height_inc: int = 0


def _nums(conn: XConnection, win: int, name: str, count: int) -> list[int]:
    values = prop_val_nums(conn.get_property(win, name))
    if len(values) != count:
        raise PropertyError(
            f"expected {count} integers in {name} but found {len(values)} "
            f"in {values!r}"
        )
    return values


def wm_name_get(conn: XConnection, win: int) -> str:
    """Return ``WM_NAME`` of ``win``."""
    return prop_val_str(conn.get_property(win, "WM_NAME"))


def wm_name_set(conn: XConnection, win: int, name: str) -> None:
    """Set ``WM_NAME`` of ``win``."""
    change_prop(conn, win, 8, "WM_NAME", "STRING", name.encode())


def wm_icon_name_get(conn: XConnection, win: int) -> str:
    """Return ``WM_ICON_NAME`` of ``win``."""
    return prop_val_str(conn.get_property(win, "WM_ICON_NAME"))


def wm_icon_name_set(conn: XConnection, win: int, name: str) -> None:
    """Set ``WM_ICON_NAME`` of ``win``."""
    change_prop(conn, win, 8, "WM_ICON_NAME", "STRING", name.encode())


def wm_normal_hints_get(conn: XConnection, win: int) -> NormalHints:
    """Return ``WM_NORMAL_HINTS``; a zero gravity reads as north-west."""
    hints = NormalHints(*_nums(conn, win, "WM_NORMAL_HINTS", 18))
    if hints.win_gravity <= 0:
        hints.win_gravity = GRAVITY_NORTH_WEST
    return hints


def wm_normal_hints_set(conn: XConnection, win: int, hints: NormalHints) -> None:
    """Set ``WM_NORMAL_HINTS``; the flags must mark the values in use."""
    change_prop32(conn, win, "WM_NORMAL_HINTS", "WM_SIZE_HINTS", *astuple(hints))


def wm_hints_get(conn: XConnection, win: int) -> Hints:
    """Return ``WM_HINTS`` of ``win``."""
    return Hints(*_nums(conn, win, "WM_HINTS", 9))


def wm_hints_set(conn: XConnection, win: int, hints: Hints) -> None:
    """Set ``WM_HINTS``; the flags must mark the values in use."""
    change_prop32(conn, win, "WM_HINTS", "WM_HINTS", *astuple(hints))


def wm_class_get(conn: XConnection, win: int) -> WmClass:
    """Return ``WM_CLASS``, which must hold exactly two strings."""
    raw = prop_val_strs(conn.get_property(win, "WM_CLASS"))
    if len(raw) != 2:
        raise PropertyError(
            f"two strings make up WM_CLASS, but found {len(raw)} in {raw!r}"
        )
    return WmClass(raw[0], raw[1])


def wm_class_set(conn: XConnection, win: int, wm_class: WmClass) -> None:
    """Set ``WM_CLASS`` as two NUL-terminated strings."""
    raw = wm_class.instance.encode() + b"\0" + wm_class.class_name.encode() + b"\0"
    change_prop(conn, win, 8, "WM_CLASS", "STRING", raw)


def wm_transient_for_get(conn: XConnection, win: int) -> int:
    """Return the window ``win`` is transient for."""
    return prop_val_window(conn.get_property(win, "WM_TRANSIENT_FOR"))


def wm_transient_for_set(conn: XConnection, win: int, transient: int) -> None:
    """Set ``WM_TRANSIENT_FOR`` of ``win``."""
    change_prop32(conn, win, "WM_TRANSIENT_FOR", "WINDOW", transient)


def wm_protocols_get(conn: XConnection, win: int) -> list[str]:
    """Return the protocol names in ``WM_PROTOCOLS``."""
    return prop_val_atoms(conn, conn.get_property(win, "WM_PROTOCOLS"))


def wm_protocols_set(conn: XConnection, win: int, atom_names: Iterable[str]) -> None:
    """Set ``WM_PROTOCOLS``, creating atoms as needed."""
    change_prop32(conn, win, "WM_PROTOCOLS", "ATOM", *str_to_atoms(conn, atom_names))


def wm_colormap_windows_get(conn: XConnection, win: int) -> list[int]:
    """Return the windows in ``WM_COLORMAP_WINDOWS``."""
    return prop_val_windows(conn.get_property(win, "WM_COLORMAP_WINDOWS"))


def wm_colormap_windows_set(conn: XConnection, win: int, windows: Iterable[int]) -> None:
    """Set ``WM_COLORMAP_WINDOWS`` of ``win``."""
    change_prop32(conn, win, "WM_COLORMAP_WINDOWS", "WINDOW", *windows)


def wm_client_machine_get(conn: XConnection, win: int) -> str:
    """Return ``WM_CLIENT_MACHINE`` of ``win``."""
    return prop_val_str(conn.get_property(win, "WM_CLIENT_MACHINE"))


def wm_client_machine_set(conn: XConnection, win: int, client: str) -> None:
    """Set ``WM_CLIENT_MACHINE`` of ``win``."""
    change_prop(conn, win, 8, "WM_CLIENT_MACHINE", "STRING", client.encode())


def wm_state_get(conn: XConnection, win: int) -> WmState:
    """Return ``WM_STATE``, which must hold exactly two integers."""
    state, icon = _nums(conn, win, "WM_STATE", 2)
    return WmState(state, icon)


def wm_state_set(conn: XConnection, win: int, state: WmState) -> None:
    """Set ``WM_STATE`` of ``win``."""
    change_prop32(conn, win, "WM_STATE", "WM_STATE", state.state, state.icon)


def wm_icon_size_get(conn: XConnection, win: int) -> IconSize:
    """Return ``WM_ICON_SIZE``, which must hold exactly six integers."""
    return IconSize(*_nums(conn, win, "WM_ICON_SIZE", 6))


def wm_icon_size_set(conn: XConnection, win: int, icon_size: IconSize) -> None:
    """Set ``WM_ICON_SIZE`` of ``win``."""
    change_prop32(conn, win, "WM_ICON_SIZE", "WM_ICON_SIZE", *astuple(icon_size))


def _is_protocol(conn: XConnection, event: ClientMessage, protocol: str) -> bool:
    if event.format != 32:
        return False
    try:
        if conn.atom_name(event.type) != "WM_PROTOCOLS":
            return False
        return conn.atom_name(event.data[0]) == protocol
    except (PropertyError, IndexError):
        return False


def is_delete_protocol(conn: XConnection, event: ClientMessage) -> bool:
    """Tell whether ``event`` is a ``WM_DELETE_WINDOW`` protocol message."""
    return _is_protocol(conn, event, "WM_DELETE_WINDOW")


def is_focus_protocol(conn: XConnection, event: ClientMessage) -> bool:
    """Tell whether ``event`` is a ``WM_TAKE_FOCUS`` protocol message."""
    return _is_protocol(conn, event, "WM_TAKE_FOCUS")