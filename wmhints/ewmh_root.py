"""EWMH properties and requests that live on the root window.

Functions ending in ``_get`` and ``_set`` read and write a property.
Functions ending in ``_req`` send a client message asking the window
manager to act, with the less common parameters set to sensible
defaults. The matching ``_req_extra`` functions expose every parameter.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

from wmhints.connection import (
    PropertyError,
    XConnection,
    change_prop,
    change_prop32,
    client_event,
    prop_val_atoms,
    prop_val_num,
    prop_val_nums,
    prop_val_strs,
    prop_val_window,
    prop_val_windows,
    str_to_atoms,
)

GRAVITY_BIT_FORGET = 0
STACK_MODE_ABOVE = 0
SOURCE_PAGER = 2


class Orientation(enum.IntEnum):
    """Orientation values of ``_NET_DESKTOP_LAYOUT``."""

    HORZ = 0
    VERT = 1


class Corner(enum.IntEnum):
    """Starting corner values of ``_NET_DESKTOP_LAYOUT``."""

    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_RIGHT = 2
    BOTTOM_LEFT = 3


@dataclass
class DesktopGeometry:
    """Width and height of the shared desktop."""

    width: int
    height: int


@dataclass
class DesktopLayout:
    """Orientation, columns, rows and starting corner of the desktop grid."""

    orientation: int
    columns: int
    rows: int
    starting_corner: int = Corner.TOP_LEFT


@dataclass
class DesktopViewport:
    """Top-left corner of one desktop's viewport."""

    x: int
    y: int


@dataclass
class FrameExtents:
    """Sizes of the decorations on each side of a window."""

    left: int
    right: int
    top: int
    bottom: int


@dataclass
class Workarea:
    """Bounding box of the usable area of one desktop."""

    x: int
    y: int
    width: int
    height: int


def _at_least(values: list[int], count: int, name: str) -> list[int]:
    if len(values) < count:
        raise PropertyError(
            f"expected at least {count} integers in {name} but found {len(values)}"
        )
    return values


def _root_nums(conn: XConnection, name: str, count: int) -> list[int]:
    return _at_least(
        prop_val_nums(conn.get_property(conn.root_window(), name)), count, name
    )


def _chunks(values: list[int], size: int) -> Iterable[tuple[int, ...]]:
    usable = len(values) - len(values) % size
    it = iter(values[:usable])
    return zip(*[it] * size)


def active_window_get(conn: XConnection) -> int:
    """Return ``_NET_ACTIVE_WINDOW``."""
    return prop_val_window(conn.get_property(conn.root_window(), "_NET_ACTIVE_WINDOW"))


def active_window_set(conn: XConnection, win: int) -> None:
    """Set ``_NET_ACTIVE_WINDOW``."""
    change_prop32(conn, conn.root_window(), "_NET_ACTIVE_WINDOW", "WINDOW", win)


def active_window_req(conn: XConnection, win: int) -> None:
    """Ask the window manager to activate ``win``."""
    active_window_req_extra(conn, win, SOURCE_PAGER, 0, 0)


def active_window_req_extra(
    conn: XConnection, win: int, source: int, time: int, current_active: int
) -> None:
    """Ask the window manager to activate ``win``, with every parameter."""
    client_event(conn, win, "_NET_ACTIVE_WINDOW", source, time, current_active)


def client_list_get(conn: XConnection) -> list[int]:
    """Return ``_NET_CLIENT_LIST``."""
    return prop_val_windows(conn.get_property(conn.root_window(), "_NET_CLIENT_LIST"))


def client_list_set(conn: XConnection, wins: Iterable[int]) -> None:
    """Set ``_NET_CLIENT_LIST``."""
    change_prop32(conn, conn.root_window(), "_NET_CLIENT_LIST", "WINDOW", *wins)


def client_list_stacking_get(conn: XConnection) -> list[int]:
    """Return ``_NET_CLIENT_LIST_STACKING``."""
    return prop_val_windows(
        conn.get_property(conn.root_window(), "_NET_CLIENT_LIST_STACKING")
    )


def client_list_stacking_set(conn: XConnection, wins: Iterable[int]) -> None:
    """Set ``_NET_CLIENT_LIST_STACKING``."""
    change_prop32(
        conn, conn.root_window(), "_NET_CLIENT_LIST_STACKING", "WINDOW", *wins
    )


def close_window(conn: XConnection, win: int) -> None:
    """Ask the window manager to close ``win``."""
    close_window_extra(conn, win, 0, SOURCE_PAGER)


def close_window_extra(conn: XConnection, win: int, time: int, source: int) -> None:
    """Ask the window manager to close ``win``, with every parameter."""
    client_event(conn, win, "_NET_CLOSE_WINDOW", time, source)


def current_desktop_get(conn: XConnection) -> int:
    """Return ``_NET_CURRENT_DESKTOP``."""
    return prop_val_num(conn.get_property(conn.root_window(), "_NET_CURRENT_DESKTOP"))


def current_desktop_set(conn: XConnection, desk: int) -> None:
    """Set ``_NET_CURRENT_DESKTOP``."""
    change_prop32(conn, conn.root_window(), "_NET_CURRENT_DESKTOP", "CARDINAL", desk)


def current_desktop_req(conn: XConnection, desk: int) -> None:
    """Ask the window manager to switch to desktop ``desk``."""
    current_desktop_req_extra(conn, desk, 0)


def current_desktop_req_extra(conn: XConnection, desk: int, time: int) -> None:
    """Ask the window manager to switch to desktop ``desk`` at ``time``."""
    client_event(conn, conn.root_window(), "_NET_CURRENT_DESKTOP", desk, time)


def desktop_names_get(conn: XConnection) -> list[str]:
    """Return ``_NET_DESKTOP_NAMES``."""
    return prop_val_strs(conn.get_property(conn.root_window(), "_NET_DESKTOP_NAMES"))


def desktop_names_set(conn: XConnection, names: Iterable[str]) -> None:
    """Set ``_NET_DESKTOP_NAMES`` as NUL-terminated UTF-8 strings."""
    raw = b"".join(name.encode("utf-8") + b"\0" for name in names)
    change_prop(conn, conn.root_window(), 8, "_NET_DESKTOP_NAMES", "UTF8_STRING", raw)


def desktop_geometry_get(conn: XConnection) -> DesktopGeometry:
    """Return ``_NET_DESKTOP_GEOMETRY``."""
    width, height = _root_nums(conn, "_NET_DESKTOP_GEOMETRY", 2)[:2]
    return DesktopGeometry(width, height)


def desktop_geometry_set(conn: XConnection, geometry: DesktopGeometry) -> None:
    """Set ``_NET_DESKTOP_GEOMETRY``."""
    change_prop32(
        conn,
        conn.root_window(),
        "_NET_DESKTOP_GEOMETRY",
        "CARDINAL",
        geometry.width,
        geometry.height,
    )


def desktop_geometry_req(conn: XConnection, geometry: DesktopGeometry) -> None:
    """Ask the window manager to change the desktop geometry."""
    client_event(
        conn,
        conn.root_window(),
        "_NET_DESKTOP_GEOMETRY",
        geometry.width,
        geometry.height,
    )


def desktop_layout_get(conn: XConnection) -> DesktopLayout:
    """Return ``_NET_DESKTOP_LAYOUT``; a missing corner reads as top-left."""
    raw = _root_nums(conn, "_NET_DESKTOP_LAYOUT", 3)
    corner = raw[3] if len(raw) > 3 else Corner.TOP_LEFT
    return DesktopLayout(raw[0], raw[1], raw[2], corner)


def desktop_layout_set(
    conn: XConnection, orientation: int, columns: int, rows: int, starting_corner: int
) -> None:
    """Set ``_NET_DESKTOP_LAYOUT``."""
    change_prop32(
        conn,
        conn.root_window(),
        "_NET_DESKTOP_LAYOUT",
        "CARDINAL",
        orientation,
        columns,
        rows,
        starting_corner,
    )


def desktop_viewport_get(conn: XConnection) -> list[DesktopViewport]:
    """Return ``_NET_DESKTOP_VIEWPORT``, one viewport per desktop."""
    coords = _root_nums(conn, "_NET_DESKTOP_VIEWPORT", 0)
    return [DesktopViewport(x, y) for x, y in _chunks(coords, 2)]


def desktop_viewport_set(
    conn: XConnection, viewports: Iterable[DesktopViewport]
) -> None:
    """Set ``_NET_DESKTOP_VIEWPORT``."""
    coords = [value for vp in viewports for value in (vp.x, vp.y)]
    change_prop32(
        conn, conn.root_window(), "_NET_DESKTOP_VIEWPORT", "CARDINAL", *coords
    )


def desktop_viewport_req(conn: XConnection, x: int, y: int) -> None:
    """Ask the window manager to move the viewport to ``(x, y)``."""
    client_event(conn, conn.root_window(), "_NET_DESKTOP_VIEWPORT", x, y)


def frame_extents_get(conn: XConnection, win: int) -> FrameExtents:
    """Return ``_NET_FRAME_EXTENTS`` of ``win``."""
    raw = _at_least(
        prop_val_nums(conn.get_property(win, "_NET_FRAME_EXTENTS")),
        4,
        "_NET_FRAME_EXTENTS",
    )
    return FrameExtents(*raw[:4])


def frame_extents_set(conn: XConnection, win: int, extents: FrameExtents) -> None:
    """Set ``_NET_FRAME_EXTENTS`` of ``win``."""
    change_prop32(
        conn,
        win,
        "_NET_FRAME_EXTENTS",
        "CARDINAL",
        extents.left,
        extents.right,
        extents.top,
        extents.bottom,
    )


def moveresize_window(
    conn: XConnection, win: int, x: int, y: int, w: int, h: int
) -> None:
    """Ask the window manager to move and resize ``win``; zero sizes are not sent."""
    moveresize_window_extra(
        conn, win, x, y, w, h, GRAVITY_BIT_FORGET, SOURCE_PAGER, True, True
    )


def resize_window(conn: XConnection, win: int, w: int, h: int) -> None:
    """Ask the window manager to resize ``win`` without moving it."""
    moveresize_window_extra(
        conn, win, 0, 0, w, h, GRAVITY_BIT_FORGET, SOURCE_PAGER, False, False
    )


def move_window(conn: XConnection, win: int, x: int, y: int) -> None:
    """Ask the window manager to move ``win`` without resizing it."""
    moveresize_window_extra(
        conn, win, x, y, 0, 0, GRAVITY_BIT_FORGET, SOURCE_PAGER, True, True
    )


def moveresize_window_extra(
    conn: XConnection,
    win: int,
    x: int,
    y: int,
    w: int,
    h: int,
    gravity: int,
    source: int,
    use_x: bool,
    use_y: bool,
) -> None:
    """Send ``_NET_MOVERESIZE_WINDOW``; sizes above zero and chosen coordinates are flagged."""
    flags = gravity | (source << 12)
    if use_x:
        flags |= 1 << 8
    if use_y:
        flags |= 1 << 9
    if w > 0:
        flags |= 1 << 10
    if h > 0:
        flags |= 1 << 11
    client_event(conn, win, "_NET_MOVERESIZE_WINDOW", flags, x, y, w, h)


def number_of_desktops_get(conn: XConnection) -> int:
    """Return ``_NET_NUMBER_OF_DESKTOPS``."""
    return prop_val_num(
        conn.get_property(conn.root_window(), "_NET_NUMBER_OF_DESKTOPS")
    )


def number_of_desktops_set(conn: XConnection, num_desks: int) -> None:
    """Set ``_NET_NUMBER_OF_DESKTOPS``."""
    change_prop32(
        conn, conn.root_window(), "_NET_NUMBER_OF_DESKTOPS", "CARDINAL", num_desks
    )


def number_of_desktops_req(conn: XConnection, num_desks: int) -> None:
    """Ask the window manager to change the number of desktops."""
    client_event(conn, conn.root_window(), "_NET_NUMBER_OF_DESKTOPS", num_desks)


def request_frame_extents(conn: XConnection, win: int) -> None:
    """Ask the window manager to estimate the frame extents of ``win``."""
    client_event(conn, win, "_NET_REQUEST_FRAME_EXTENTS")


def restack_window(conn: XConnection, win: int) -> None:
    """Ask the window manager to raise ``win`` to the top of the stack."""
    restack_window_extra(conn, win, STACK_MODE_ABOVE, 0, SOURCE_PAGER)


def restack_window_extra(
    conn: XConnection, win: int, stack_mode: int, sibling: int, source: int
) -> None:
    """Send ``_NET_RESTACK_WINDOW`` with every parameter."""
    client_event(conn, win, "_NET_RESTACK_WINDOW", source, sibling, stack_mode)


def showing_desktop_get(conn: XConnection) -> bool:
    """Return whether ``_NET_SHOWING_DESKTOP`` is 1."""
    reply = conn.get_property(conn.root_window(), "_NET_SHOWING_DESKTOP")
    return prop_val_num(reply) == 1


def showing_desktop_set(conn: XConnection, show: bool) -> None:
    """Set ``_NET_SHOWING_DESKTOP``."""
    change_prop32(
        conn, conn.root_window(), "_NET_SHOWING_DESKTOP", "CARDINAL", int(bool(show))
    )


def showing_desktop_req(conn: XConnection, show: bool) -> None:
    """Ask the window manager to enter or leave showing-desktop mode."""
    client_event(conn, conn.root_window(), "_NET_SHOWING_DESKTOP", int(bool(show)))


def supported_get(conn: XConnection) -> list[str]:
    """Return the atom names in ``_NET_SUPPORTED``."""
    return prop_val_atoms(conn, conn.get_property(conn.root_window(), "_NET_SUPPORTED"))


def supported_set(conn: XConnection, atom_names: Iterable[str]) -> None:
    """Set ``_NET_SUPPORTED``, creating atoms as needed."""
    atoms = str_to_atoms(conn, atom_names)
    change_prop32(conn, conn.root_window(), "_NET_SUPPORTED", "ATOM", *atoms)


def supporting_wm_check_get(conn: XConnection, win: int) -> int:
    """Return ``_NET_SUPPORTING_WM_CHECK`` of ``win``."""
    return prop_val_window(conn.get_property(win, "_NET_SUPPORTING_WM_CHECK"))


def supporting_wm_check_set(conn: XConnection, win: int, wm_win: int) -> None:
    """Set ``_NET_SUPPORTING_WM_CHECK`` of ``win``."""
    change_prop32(conn, win, "_NET_SUPPORTING_WM_CHECK", "WINDOW", wm_win)


def virtual_roots_get(conn: XConnection) -> list[int]:
    """Return ``_NET_VIRTUAL_ROOTS``."""
    return prop_val_windows(conn.get_property(conn.root_window(), "_NET_VIRTUAL_ROOTS"))


def virtual_roots_set(conn: XConnection, wins: Iterable[int]) -> None:
    """Set ``_NET_VIRTUAL_ROOTS``."""
    change_prop32(conn, conn.root_window(), "_NET_VIRTUAL_ROOTS", "WINDOW", *wins)


def visible_desktops_get(conn: XConnection) -> list[int]:
    """Return ``_NET_VISIBLE_DESKTOPS``, the desktops shown at once."""
    return prop_val_nums(
        conn.get_property(conn.root_window(), "_NET_VISIBLE_DESKTOPS")
    )


def visible_desktops_set(conn: XConnection, desktops: Iterable[int]) -> None:
    """Set ``_NET_VISIBLE_DESKTOPS``."""
    change_prop32(
        conn, conn.root_window(), "_NET_VISIBLE_DESKTOPS", "CARDINAL", *desktops
    )


def workarea_get(conn: XConnection) -> list[Workarea]:
    """Return ``_NET_WORKAREA``, one rectangle per desktop."""
    rects = _root_nums(conn, "_NET_WORKAREA", 0)
    return [Workarea(*rect) for rect in _chunks(rects, 4)]


def workarea_set(conn: XConnection, workareas: Iterable[Workarea]) -> None:
    """Set ``_NET_WORKAREA``."""
    rects = [
        value
        for area in workareas
        for value in (area.x, area.y, area.width, area.height)
    ]
    change_prop32(conn, conn.root_window(), "_NET_WORKAREA", "CARDINAL", *rects)