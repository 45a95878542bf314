"""EWMH properties and requests that concern individual client windows.

Functions ending in ``_get`` and ``_set`` read and write a property on a
window. Functions ending in ``_req`` (or named after the action, such as
``wm_ping``) send a client message with sensible defaults; the matching
``_extra`` functions expose every parameter of that message.
"""

from __future__ import annotations

import enum
from dataclasses import astuple, dataclass, field
from itertools import islice
from typing import Iterable

from wmhints.connection import (
    PropertyError,
    XConnection,
    atom,
    change_prop,
    change_prop32,
    client_event,
    prop_val_atoms,
    prop_val_num,
    prop_val_nums,
    prop_val_str,
    prop_val_window,
    str_to_atoms,
)
from wmhints.ewmh_root import supporting_wm_check_get

SOURCE_PAGER = 2
_OPACITY_MAX = 0xFFFFFFFF


class MoveResizeDirection(enum.IntEnum):
    """Direction values of ``_NET_WM_MOVERESIZE``."""

    SIZE_TOP_LEFT = 0
    SIZE_TOP = 1
    SIZE_TOP_RIGHT = 2
    SIZE_RIGHT = 3
    SIZE_BOTTOM_RIGHT = 4
    SIZE_BOTTOM = 5
    SIZE_BOTTOM_LEFT = 6
    SIZE_LEFT = 7
    MOVE = 8
    SIZE_KEYBOARD = 9
    MOVE_KEYBOARD = 10
    CANCEL = 11
    INFER = 12


class StateAction(enum.IntEnum):
    """The action parameter of a ``_NET_WM_STATE`` request."""

    REMOVE = 0
    ADD = 1
    TOGGLE = 2


@dataclass
class WmFullscreenMonitors:
    """Monitors whose edges bound a fullscreen window."""

    top: int
    bottom: int
    left: int
    right: int


@dataclass
class WmIcon:
    """One icon: its size and ARGB pixel data."""

    width: int
    height: int
    data: list[int] = field(default_factory=list)


@dataclass
class WmIconGeometry:
    """Where a window's icon is shown, for example in a taskbar."""

    x: int
    y: int
    width: int
    height: int


@dataclass
class WmOpaqueRegion:
    """An opaque rectangle relative to the client window."""

    x: int
    y: int
    width: int
    height: int


@dataclass
class WmStrut:
    """Space reserved at each edge of the screen."""

    left: int
    right: int
    top: int
    bottom: int


@dataclass
class WmStrutPartial:
    """Reserved space at each edge, with the span it covers along that edge."""

    left: int
    right: int
    top: int
    bottom: int
    left_start_y: int = 0
    left_end_y: int = 0
    right_start_y: int = 0
    right_end_y: int = 0
    top_start_x: int = 0
    top_end_x: int = 0
    bottom_start_x: int = 0
    bottom_end_x: int = 0


def _nums(conn: XConnection, win: int, name: str, count: int) -> list[int]:
    values = prop_val_nums(conn.get_property(win, name))
    if len(values) < count:
        raise PropertyError(
            f"expected at least {count} integers in {name} but found {len(values)}"
        )
    return values


def _bool_prop(conn: XConnection, win: int, name: str) -> bool:
    return prop_val_num(conn.get_property(win, name)) == 1


def wm_allowed_actions_get(conn: XConnection, win: int) -> list[str]:
    """Return the action names in ``_NET_WM_ALLOWED_ACTIONS``."""
    return prop_val_atoms(conn, conn.get_property(win, "_NET_WM_ALLOWED_ACTIONS"))


def wm_allowed_actions_set(
    conn: XConnection, win: int, atom_names: Iterable[str]
) -> None:
    """Set ``_NET_WM_ALLOWED_ACTIONS``, creating atoms as needed."""
    atoms = str_to_atoms(conn, atom_names)
    change_prop32(conn, win, "_NET_WM_ALLOWED_ACTIONS", "ATOM", *atoms)


def wm_desktop_get(conn: XConnection, win: int) -> int:
    """Return ``_NET_WM_DESKTOP`` of ``win``."""
    return prop_val_num(conn.get_property(win, "_NET_WM_DESKTOP"))


def wm_desktop_set(conn: XConnection, win: int, desk: int) -> None:
    """Set ``_NET_WM_DESKTOP`` of ``win``."""
    change_prop32(conn, win, "_NET_WM_DESKTOP", "CARDINAL", desk)


def wm_desktop_req(conn: XConnection, win: int, desk: int) -> None:
    """Ask the window manager to move ``win`` to desktop ``desk``."""
    wm_desktop_req_extra(conn, win, desk, SOURCE_PAGER)


def wm_desktop_req_extra(conn: XConnection, win: int, desk: int, source: int) -> None:
    """Send ``_NET_WM_DESKTOP`` with every parameter."""
    client_event(conn, win, "_NET_WM_DESKTOP", desk, source)


def wm_fullscreen_monitors_get(conn: XConnection, win: int) -> WmFullscreenMonitors:
    """Return ``_NET_WM_FULLSCREEN_MONITORS`` of ``win``."""
    raw = _nums(conn, win, "_NET_WM_FULLSCREEN_MONITORS", 4)
    return WmFullscreenMonitors(*raw[:4])


def wm_fullscreen_monitors_set(
    conn: XConnection, win: int, edges: WmFullscreenMonitors
) -> None:
    """Set ``_NET_WM_FULLSCREEN_MONITORS`` of ``win``."""
    change_prop32(
        conn, win, "_NET_WM_FULLSCREEN_MONITORS", "CARDINAL", *astuple(edges)
    )


def wm_fullscreen_monitors_req(
    conn: XConnection, win: int, edges: WmFullscreenMonitors
) -> None:
    """Ask the window manager to span ``win`` over the given monitors."""
    wm_fullscreen_monitors_req_extra(conn, win, edges, SOURCE_PAGER)


def wm_fullscreen_monitors_req_extra(
    conn: XConnection, win: int, edges: WmFullscreenMonitors, source: int
) -> None:
    """Send ``_NET_WM_FULLSCREEN_MONITORS`` with every parameter."""
    client_event(
        conn,
        win,
        "_NET_WM_FULLSCREEN_MONITORS",
        edges.top,
        edges.bottom,
        edges.left,
        edges.right,
        source,
    )


def wm_handled_icons_get(conn: XConnection, win: int) -> bool:
    """Return whether ``_NET_WM_HANDLED_ICONS`` of ``win`` is 1."""
    return _bool_prop(conn, win, "_NET_WM_HANDLED_ICONS")


def wm_handled_icons_set(conn: XConnection, handle: bool) -> None:
    """Set ``_NET_WM_HANDLED_ICONS`` on the root window."""
    change_prop32(
        conn, conn.root_window(), "_NET_WM_HANDLED_ICONS", "CARDINAL", int(bool(handle))
    )


def wm_icon_get(conn: XConnection, win: int) -> list[WmIcon]:
    """Return every icon stored in ``_NET_WM_ICON``."""
    values = iter(prop_val_nums(conn.get_property(win, "_NET_WM_ICON")))
    icons: list[WmIcon] = []
    for width in values:
        height = next(values, None)
        if height is None:
            raise PropertyError("_NET_WM_ICON ends before an icon's height")
        size = width * height
        data = list(islice(values, size))
        if len(data) != size:
            raise PropertyError(
                f"_NET_WM_ICON declares a {width}x{height} icon but holds "
                f"only {len(data)} pixels for it"
            )
        icons.append(WmIcon(width, height, data))
    return icons


def wm_icon_set(conn: XConnection, win: int, icons: Iterable[WmIcon]) -> None:
    """Set ``_NET_WM_ICON`` of ``win``."""
    raw = [
        value
        for icon in icons
        for value in (icon.width, icon.height, *icon.data)
    ]
    change_prop32(conn, win, "_NET_WM_ICON", "CARDINAL", *raw)


def wm_icon_geometry_get(conn: XConnection, win: int) -> WmIconGeometry:
    """Return ``_NET_WM_ICON_GEOMETRY`` of ``win``."""
    raw = _nums(conn, win, "_NET_WM_ICON_GEOMETRY", 4)
    return WmIconGeometry(*raw[:4])


def wm_icon_geometry_set(
    conn: XConnection, win: int, geometry: WmIconGeometry
) -> None:
    """Set ``_NET_WM_ICON_GEOMETRY`` of ``win``."""
    change_prop32(
        conn, win, "_NET_WM_ICON_GEOMETRY", "CARDINAL", *astuple(geometry)
    )


def wm_icon_name_get(conn: XConnection, win: int) -> str:
    """Return ``_NET_WM_ICON_NAME`` of ``win``."""
    return prop_val_str(conn.get_property(win, "_NET_WM_ICON_NAME"))


def wm_icon_name_set(conn: XConnection, win: int, name: str) -> None:
    """Set ``_NET_WM_ICON_NAME`` of ``win``."""
    change_prop(conn, win, 8, "_NET_WM_ICON_NAME", "UTF8_STRING", name.encode("utf-8"))


def wm_moveresize(conn: XConnection, win: int, direction: int) -> None:
    """Ask the window manager to start an interactive move or resize."""
    wm_moveresize_extra(conn, win, direction, 0, 0, 0, SOURCE_PAGER)


def wm_moveresize_extra(
    conn: XConnection,
    win: int,
    direction: int,
    x_root: int,
    y_root: int,
    button: int,
    source: int,
) -> None:
    """Send ``_NET_WM_MOVERESIZE`` with every parameter."""
    client_event(
        conn, win, "_NET_WM_MOVERESIZE", x_root, y_root, direction, button, source
    )


def wm_name_get(conn: XConnection, win: int) -> str:
    """Return ``_NET_WM_NAME`` of ``win``."""
    return prop_val_str(conn.get_property(win, "_NET_WM_NAME"))


def wm_name_set(conn: XConnection, win: int, name: str) -> None:
    """Set ``_NET_WM_NAME`` of ``win``."""
    change_prop(conn, win, 8, "_NET_WM_NAME", "UTF8_STRING", name.encode("utf-8"))


def wm_opaque_region_get(conn: XConnection, win: int) -> list[WmOpaqueRegion]:
    """Return the rectangles in ``_NET_WM_OPAQUE_REGION``."""
    raw = prop_val_nums(conn.get_property(win, "_NET_WM_OPAQUE_REGION"))
    usable = raw[: len(raw) - len(raw) % 4]
    it = iter(usable)
    return [WmOpaqueRegion(*rect) for rect in zip(it, it, it, it)]


def wm_opaque_region_set(
    conn: XConnection, win: int, regions: Iterable[WmOpaqueRegion]
) -> None:
    """Set ``_NET_WM_OPAQUE_REGION`` of ``win``."""
    raw = [value for region in regions for value in astuple(region)]
    change_prop32(conn, win, "_NET_WM_OPAQUE_REGION", "CARDINAL", *raw)


def wm_pid_get(conn: XConnection, win: int) -> int:
    """Return ``_NET_WM_PID`` of ``win``."""
    return prop_val_num(conn.get_property(win, "_NET_WM_PID"))


def wm_pid_set(conn: XConnection, win: int, pid: int) -> None:
    """Set ``_NET_WM_PID`` of ``win``."""
    change_prop32(conn, win, "_NET_WM_PID", "CARDINAL", pid)


def wm_ping(conn: XConnection, win: int, response: bool) -> None:
    """Send a ``_NET_WM_PING``; a response goes to the root window."""
    wm_ping_extra(conn, win, response, 0)


def wm_ping_extra(conn: XConnection, win: int, response: bool, time: int) -> None:
    """Send a ``_NET_WM_PING`` with every parameter."""
    ping_atom = atom(conn, "_NET_WM_PING", False)
    target = conn.root_window() if response else win
    client_event(conn, target, "WM_PROTOCOLS", ping_atom, time, win)


def wm_state_get(conn: XConnection, win: int) -> list[str]:
    """Return the state names in ``_NET_WM_STATE``."""
    return prop_val_atoms(conn, conn.get_property(win, "_NET_WM_STATE"))


def wm_state_set(conn: XConnection, win: int, atom_names: Iterable[str]) -> None:
    """Set ``_NET_WM_STATE``, creating atoms as needed."""
    atoms = str_to_atoms(conn, atom_names)
    change_prop32(conn, win, "_NET_WM_STATE", "ATOM", *atoms)


def wm_state_req(conn: XConnection, win: int, action: int, atom_name: str) -> None:
    """Ask the window manager to change one state of ``win``."""
    wm_state_req_extra(conn, win, action, atom_name, "", SOURCE_PAGER)


def wm_state_req_extra(
    conn: XConnection,
    win: int,
    action: int,
    first: str,
    second: str,
    source: int,
) -> None:
    """Ask the window manager to change up to two states of ``win``."""
    first_atom = atom(conn, first, False)
    second_atom = atom(conn, second, False) if second else 0
    client_event(conn, win, "_NET_WM_STATE", action, first_atom, second_atom, source)


def wm_strut_get(conn: XConnection, win: int) -> WmStrut:
    """Return ``_NET_WM_STRUT`` of ``win``."""
    raw = _nums(conn, win, "_NET_WM_STRUT", 4)
    return WmStrut(*raw[:4])


def wm_strut_set(conn: XConnection, win: int, strut: WmStrut) -> None:
    """Set ``_NET_WM_STRUT`` of ``win``."""
    change_prop32(conn, win, "_NET_WM_STRUT", "CARDINAL", *astuple(strut))


def wm_strut_partial_get(conn: XConnection, win: int) -> WmStrutPartial:
    """Return ``_NET_WM_STRUT_PARTIAL`` of ``win``."""
    raw = _nums(conn, win, "_NET_WM_STRUT_PARTIAL", 12)
    return WmStrutPartial(*raw[:12])


def wm_strut_partial_set(conn: XConnection, win: int, strut: WmStrutPartial) -> None:
    """Set ``_NET_WM_STRUT_PARTIAL`` of ``win``."""
    change_prop32(conn, win, "_NET_WM_STRUT_PARTIAL", "CARDINAL", *astuple(strut))


def wm_sync_request(conn: XConnection, win: int, req_num: int) -> None:
    """Send a ``_NET_WM_SYNC_REQUEST`` with a 64-bit counter value."""
    wm_sync_request_extra(conn, win, req_num, 0)


def wm_sync_request_extra(
    conn: XConnection, win: int, req_num: int, time: int
) -> None:
    """Send a ``_NET_WM_SYNC_REQUEST`` with every parameter."""
    sync_atom = atom(conn, "_NET_WM_SYNC_REQUEST", False)
    low = req_num & 0xFFFFFFFF
    high = (req_num >> 32) & 0xFFFFFFFF
    client_event(conn, win, "WM_PROTOCOLS", sync_atom, time, low, high)


def wm_sync_request_counter_get(conn: XConnection, win: int) -> int:
    """Return ``_NET_WM_SYNC_REQUEST_COUNTER`` of ``win``."""
    return prop_val_num(conn.get_property(win, "_NET_WM_SYNC_REQUEST_COUNTER"))


def wm_sync_request_counter_set(conn: XConnection, win: int, counter: int) -> None:
    """Set ``_NET_WM_SYNC_REQUEST_COUNTER`` of ``win``."""
    change_prop32(conn, win, "_NET_WM_SYNC_REQUEST_COUNTER", "CARDINAL", counter)


def wm_user_time_get(conn: XConnection, win: int) -> int:
    """Return ``_NET_WM_USER_TIME`` of ``win``."""
    return prop_val_num(conn.get_property(win, "_NET_WM_USER_TIME"))


def wm_user_time_set(conn: XConnection, win: int, user_time: int) -> None:
    """Set ``_NET_WM_USER_TIME`` of ``win``."""
    change_prop32(conn, win, "_NET_WM_USER_TIME", "CARDINAL", user_time)


def wm_user_time_window_get(conn: XConnection, win: int) -> int:
    """Return ``_NET_WM_USER_TIME_WINDOW`` of ``win``."""
    return prop_val_window(conn.get_property(win, "_NET_WM_USER_TIME_WINDOW"))


def wm_user_time_window_set(conn: XConnection, win: int, time_win: int) -> None:
    """Set ``_NET_WM_USER_TIME_WINDOW`` of ``win``."""
    change_prop32(conn, win, "_NET_WM_USER_TIME_WINDOW", "CARDINAL", time_win)


def wm_visible_icon_name_get(conn: XConnection, win: int) -> str:
    """Return ``_NET_WM_VISIBLE_ICON_NAME`` of ``win``."""
    return prop_val_str(conn.get_property(win, "_NET_WM_VISIBLE_ICON_NAME"))


def wm_visible_icon_name_set(conn: XConnection, win: int, name: str) -> None:
    """Set ``_NET_WM_VISIBLE_ICON_NAME`` of ``win``."""
    change_prop(
        conn, win, 8, "_NET_WM_VISIBLE_ICON_NAME", "UTF8_STRING", name.encode("utf-8")
    )


def wm_visible_name_get(conn: XConnection, win: int) -> str:
    """Return ``_NET_WM_VISIBLE_NAME`` of ``win``."""
    return prop_val_str(conn.get_property(win, "_NET_WM_VISIBLE_NAME"))


def wm_visible_name_set(conn: XConnection, win: int, name: str) -> None:
    """Set ``_NET_WM_VISIBLE_NAME`` of ``win``."""
    change_prop(
        conn, win, 8, "_NET_WM_VISIBLE_NAME", "UTF8_STRING", name.encode("utf-8")
    )


def wm_window_opacity_get(conn: XConnection, win: int) -> float:
    """Return ``_NET_WM_WINDOW_OPACITY`` as a value from 0.0 to 1.0."""
    raw = prop_val_num(conn.get_property(win, "_NET_WM_WINDOW_OPACITY"))
    return raw / _OPACITY_MAX


def wm_window_opacity_set(conn: XConnection, win: int, opacity: float) -> None:
    """Set ``_NET_WM_WINDOW_OPACITY`` from a value from 0.0 to 1.0."""
    change_prop32(
        conn, win, "_NET_WM_WINDOW_OPACITY", "CARDINAL", int(opacity * _OPACITY_MAX)
    )


def wm_window_type_get(conn: XConnection, win: int) -> list[str]:
    """Return the type names in ``_NET_WM_WINDOW_TYPE``."""
    return prop_val_atoms(conn, conn.get_property(win, "_NET_WM_WINDOW_TYPE"))


def wm_window_type_set(conn: XConnection, win: int, atom_names: Iterable[str]) -> None:
    """Set ``_NET_WM_WINDOW_TYPE``, creating atoms as needed."""
    atoms = str_to_atoms(conn, atom_names)
    change_prop32(conn, win, "_NET_WM_WINDOW_TYPE", "ATOM", *atoms)


def get_ewmh_wm(conn: XConnection) -> str:
    """Return the name of the running EWMH-conforming window manager."""
    try:
        child_check = supporting_wm_check_get(conn, conn.root_window())
        child_check2 = supporting_wm_check_get(conn, child_check)
    except PropertyError as err:
        raise PropertyError(f"GetEwmhWM: Failed because: {err}") from err
    if child_check != child_check2:
        raise PropertyError(
            "GetEwmhWM: _NET_SUPPORTING_WM_CHECK value on the root window "
            f"({child_check:x}) does not match _NET_SUPPORTING_WM_CHECK value "
            f"on the child window ({child_check2:x})."
        )
    return wm_name_get(conn, child_check)