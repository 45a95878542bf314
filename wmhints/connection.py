"""An in-memory X connection model plus the property and client-message
helpers that the ICCCM and EWMH modules are built on.

Windows own properties keyed by atom. Each property carries a format
(8, 16 or 32 bits per item), a type atom and raw bytes. Client messages
sent to a window are recorded on the connection, so callers can see
exactly what would travel over the wire.

The naming used by the hint modules follows one scheme: ``*_get`` and
``*_set`` read and write a property, ``*_req`` asks the window manager to
act by sending a client message with sensible defaults, and
``*_req_extra`` exposes every parameter of that message.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Iterable, Sequence

EVENT_MASK_SUBSTRUCTURE_NOTIFY = 1 << 19
EVENT_MASK_SUBSTRUCTURE_REDIRECT = 1 << 20
ROOT_EVENT_MASK = EVENT_MASK_SUBSTRUCTURE_NOTIFY | EVENT_MASK_SUBSTRUCTURE_REDIRECT

_VALID_FORMATS = (8, 16, 32)
_CLIENT_MESSAGE_SLOTS = {8: 20, 16: 10, 32: 5}
_UNPACK_CODES = {8: "<B", 16: "<H", 32: "<I"}

# The atoms that every X server defines, in protocol order starting at 1.
_PREDEFINED_ATOMS = (
    "PRIMARY", "SECONDARY", "ARC", "ATOM", "BITMAP", "CARDINAL", "COLORMAP",
    "CURSOR", "CUT_BUFFER0", "CUT_BUFFER1", "CUT_BUFFER2", "CUT_BUFFER3",
    "CUT_BUFFER4", "CUT_BUFFER5", "CUT_BUFFER6", "CUT_BUFFER7", "DRAWABLE",
    "FONT", "INTEGER", "PIXMAP", "POINT", "RECTANGLE", "RESOURCE_MANAGER",
    "RGB_COLOR_MAP", "RGB_BEST_MAP", "RGB_BLUE_MAP", "RGB_DEFAULT_MAP",
    "RGB_GRAY_MAP", "RGB_GREEN_MAP", "RGB_RED_MAP", "STRING", "VISUALID",
    "WINDOW", "WM_COMMAND", "WM_HINTS", "WM_CLIENT_MACHINE", "WM_ICON_NAME",
    "WM_ICON_SIZE", "WM_NAME", "WM_NORMAL_HINTS", "WM_SIZE_HINTS",
    "WM_ZOOM_HINTS", "MIN_SPACE", "NORM_SPACE", "MAX_SPACE", "END_SPACE",
    "SUPERSCRIPT_X", "SUPERSCRIPT_Y", "SUBSCRIPT_X", "SUBSCRIPT_Y",
    "UNDERLINE_POSITION", "UNDERLINE_THICKNESS", "STRIKEOUT_ASCENT",
    "STRIKEOUT_DESCENT", "ITALIC_ANGLE", "X_HEIGHT", "QUAD_WIDTH", "WEIGHT",
    "POINT_SIZE", "RESOLUTION", "COPYRIGHT", "NOTICE", "FONT_NAME",
    "FAMILY_NAME", "FULL_NAME", "CAP_HEIGHT", "WM_CLASS", "WM_TRANSIENT_FOR",
)


class PropertyError(Exception):
    """Raised when a property or atom is missing or holds unexpected data."""


@dataclass(frozen=True)
class PropertyReply:
    """The stored contents of one window property."""

    format: int
    type: int
    value: bytes


@dataclass(frozen=True)
class ClientMessage:
    """A ClientMessage event: format, target window, type atom and data."""

    format: int
    window: int
    type: int
    data: tuple[int, ...]


@dataclass
class XConnection:
    """An in-memory X server holding atoms, window properties and sent events."""

    root: int = 1
    sent_events: list[tuple[int, ClientMessage, int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._atoms: dict[str, int] = {
            name: number for number, name in enumerate(_PREDEFINED_ATOMS, start=1)
        }
        self._names: dict[int, str] = {v: k for k, v in self._atoms.items()}
        self._properties: dict[tuple[int, int], PropertyReply] = {}

    def root_window(self) -> int:
        """Return the id of the root window."""
        return self.root

    def intern_atom(self, name: str, only_if_exists: bool) -> int:
        """Return the atom for ``name``; 0 if it is absent and may not be created."""
        existing = self._atoms.get(name)
        if existing is not None:
            return existing
        if only_if_exists:
            return 0
        number = len(self._atoms) + 1
        self._atoms[name] = number
        self._names[number] = name
        return number

    def atom_name(self, atom: int) -> str:
        """Return the name of ``atom``."""
        try:
            return self._names[atom]
        except KeyError:
            raise PropertyError(f"atom {atom} does not exist") from None

    def get_property(self, window: int, name: str) -> PropertyReply:
        """Return the property ``name`` on ``window``."""
        atom_id = self.intern_atom(name, True)
        reply = self._properties.get((window, atom_id)) if atom_id else None
        if reply is None:
            raise PropertyError(f"no such property '{name}' on window {window:#x}")
        return reply

    def change_property(
        self, window: int, fmt: int, name: str, type_name: str, data: bytes
    ) -> None:
        """Replace the property ``name`` on ``window`` with ``data``."""
        if fmt not in _VALID_FORMATS:
            raise ValueError(f"property format must be 8, 16 or 32, not {fmt}")
        raw = bytes(data)
        if len(raw) % (fmt // 8):
            raise ValueError(
                f"{len(raw)} bytes cannot be split into {fmt}-bit items"
            )
        prop_atom = self.intern_atom(name, False)
        type_atom = self.intern_atom(type_name, False)
        self._properties[(window, prop_atom)] = PropertyReply(fmt, type_atom, raw)

    def send_event(self, window: int, event: ClientMessage, mask: int) -> None:
        """Deliver ``event`` to ``window`` with the given event mask."""
        self.sent_events.append((window, event, mask))


def atom(conn: XConnection, name: str, only_if_exists: bool) -> int:
    """Return the atom for ``name``, raising if it does not exist."""
    result = conn.intern_atom(name, only_if_exists)
    if result == 0:
        raise PropertyError(f"atom '{name}' does not exist")
    return result


def _items(reply: PropertyReply, fmt: int) -> list[int]:
    if reply.format != fmt:
        raise PropertyError(
            f"expected format {fmt} but the property has format {reply.format}"
        )
    return [item for (item,) in struct.iter_unpack(_UNPACK_CODES[fmt], reply.value)]


def prop_val_nums(reply: PropertyReply) -> list[int]:
    """Return the 32-bit numbers held in ``reply``."""
    return _items(reply, 32)


def prop_val_num(reply: PropertyReply) -> int:
    """Return the first 32-bit number held in ``reply``."""
    nums = prop_val_nums(reply)
    if not nums:
        raise PropertyError("the property holds no value")
    return nums[0]


def prop_val_windows(reply: PropertyReply) -> list[int]:
    """Return the window ids held in ``reply``."""
    return prop_val_nums(reply)


def prop_val_window(reply: PropertyReply) -> int:
    """Return the single window id held in ``reply``."""
    return prop_val_num(reply)


def prop_val_str(reply: PropertyReply) -> str:
    """Return the 8-bit string held in ``reply``."""
    if reply.format != 8:
        raise PropertyError(
            f"expected format 8 but the property has format {reply.format}"
        )
    return reply.value.decode("utf-8", errors="replace")


def prop_val_strs(reply: PropertyReply) -> list[str]:
    """Return the NUL-separated strings held in ``reply``."""
    if reply.format != 8:
        raise PropertyError(
            f"expected format 8 but the property has format {reply.format}"
        )
    parts = reply.value.split(b"\0")
    if parts and not parts[-1]:
        parts.pop()
    return [part.decode("utf-8", errors="replace") for part in parts]


def prop_val_atoms(conn: XConnection, reply: PropertyReply) -> list[str]:
    """Return the names of the atoms held in ``reply``."""
    return [conn.atom_name(item) for item in prop_val_nums(reply)]


def str_to_atoms(conn: XConnection, names: Iterable[str]) -> list[int]:
    """Intern every name in ``names``, creating atoms as needed."""
    return [atom(conn, name, False) for name in names]


def change_prop(
    conn: XConnection, window: int, fmt: int, name: str, type_name: str, data: bytes
) -> None:
    """Set property ``name`` on ``window`` to raw ``data`` of format ``fmt``."""
    conn.change_property(window, fmt, name, type_name, bytes(data))


def _pack32(values: Sequence[int]) -> bytes:
    return b"".join(struct.pack("<I", int(v) & 0xFFFFFFFF) for v in values)


def change_prop32(
    conn: XConnection, window: int, name: str, type_name: str, *args: int
) -> None:
    """Set property ``name`` on ``window`` to a list of 32-bit numbers."""
    change_prop(conn, window, 32, name, type_name, _pack32(args))


def new_client_message(
    fmt: int, window: int, message_type: int, *args: int
) -> ClientMessage:
    """Build a ClientMessage, padding its data with zeros."""
    slots = _CLIENT_MESSAGE_SLOTS.get(fmt)
    if slots is None:
        raise ValueError(f"client message format must be 8, 16 or 32, not {fmt}")
    if len(args) > slots:
        raise ValueError(
            f"a format {fmt} client message holds at most {slots} items, "
            f"not {len(args)}"
        )
    mask = (1 << fmt) - 1
    data: list[int] = []
    for value in args:
        if not isinstance(value, int):
            raise TypeError(
                f"client message data must be integers, not {type(value).__name__}"
            )
        data.append(int(value) & mask)
    data.extend([0] * (slots - len(data)))
    return ClientMessage(fmt, window, message_type, tuple(data))


def client_event(
    conn: XConnection, window: int, message_type: str, *args: int
) -> None:
    """Send a 32-bit ClientMessage about ``window`` to the root window."""
    type_atom = atom(conn, message_type, False)
    message = new_client_message(32, window, type_atom, *args)
    conn.send_event(conn.root_window(), message, ROOT_EVENT_MASK)