import pytest

from wmhints import icccm
from wmhints.connection import (
    PropertyError,
    XConnection,
    atom,
    change_prop32,
    new_client_message,
)

WIN = 0x400001


@pytest.fixture
def conn():
    return XConnection()


def test_wm_name_round_trip_and_type(conn):
    icccm.wm_name_set(conn, WIN, "xterm")
    assert icccm.wm_name_get(conn, WIN) == "xterm"
    reply = conn.get_property(WIN, "WM_NAME")
    assert reply.format == 8
    assert conn.atom_name(reply.type) == "STRING"


def test_wm_icon_name_round_trip(conn):
    icccm.wm_icon_name_set(conn, WIN, "term")
    assert icccm.wm_icon_name_get(conn, WIN) == "term"


def test_missing_property_raises(conn):
    with pytest.raises(PropertyError):
        icccm.wm_name_get(conn, WIN)


def test_normal_hints_round_trip(conn):
    hints = icccm.NormalHints(
        flags=icccm.SizeHint.P_MIN_SIZE | icccm.SizeHint.P_RESIZE_INC,
        x=10, y=20, width=300, height=200,
        min_width=50, min_height=40, width_inc=6, height_inc=13,
        win_gravity=5,
    )
    icccm.wm_normal_hints_set(conn, WIN, hints)
    got = icccm.wm_normal_hints_get(conn, WIN)
    assert got == hints
    assert got.flags & icccm.SizeHint.P_RESIZE_INC
    assert not got.flags & icccm.SizeHint.P_ASPECT
    assert conn.atom_name(conn.get_property(WIN, "WM_NORMAL_HINTS").type) == "WM_SIZE_HINTS"


def test_normal_hints_zero_gravity_defaults_to_north_west(conn):
    icccm.wm_normal_hints_set(conn, WIN, icccm.NormalHints(width=10))
    got = icccm.wm_normal_hints_get(conn, WIN)
    assert got.win_gravity == icccm.GRAVITY_NORTH_WEST
    assert got.width == 10


def test_normal_hints_wrong_length(conn):
    change_prop32(conn, WIN, "WM_NORMAL_HINTS", "WM_SIZE_HINTS", 1, 2, 3)
    with pytest.raises(PropertyError):
        icccm.wm_normal_hints_get(conn, WIN)


def test_hints_round_trip(conn):
    hints = icccm.Hints(
        flags=icccm.Hint.INPUT | icccm.Hint.STATE | icccm.Hint.URGENCY,
        input=1, initial_state=icccm.WindowState.ICONIC,
        icon_pixmap=0x200, icon_window=0x300, icon_x=4, icon_y=8,
        icon_mask=0x500, window_group=WIN,
    )
    icccm.wm_hints_set(conn, WIN, hints)
    got = icccm.wm_hints_get(conn, WIN)
    assert got == hints
    assert got.initial_state == icccm.WindowState.ICONIC
    assert got.flags & icccm.Hint.URGENCY


def test_hints_wire_order(conn):
    hints = icccm.Hints(flags=7, input=1, initial_state=3, icon_pixmap=0x200,
                        icon_window=0x300, icon_x=4, icon_y=8, icon_mask=0x500,
                        window_group=0x600)
    icccm.wm_hints_set(conn, WIN, hints)
    from wmhints.connection import prop_val_nums
    assert prop_val_nums(conn.get_property(WIN, "WM_HINTS")) == [
        7, 1, 3, 0x200, 0x300, 4, 8, 0x500, 0x600,
    ]


def test_hints_wrong_length(conn):
    change_prop32(conn, WIN, "WM_HINTS", "WM_HINTS", *range(8))
    with pytest.raises(PropertyError):
        icccm.wm_hints_get(conn, WIN)


def test_wm_class_wire_bytes_and_round_trip(conn):
    icccm.wm_class_set(conn, WIN, icccm.WmClass("xterm", "XTerm"))
    assert conn.get_property(WIN, "WM_CLASS").value == b"xterm\0XTerm\0"
    assert icccm.wm_class_get(conn, WIN) == icccm.WmClass("xterm", "XTerm")


def test_wm_class_needs_two_strings(conn):
    conn.change_property(WIN, 8, "WM_CLASS", "STRING", b"only\0")
    with pytest.raises(PropertyError):
        icccm.wm_class_get(conn, WIN)


def test_transient_for_round_trip(conn):
    icccm.wm_transient_for_set(conn, WIN, 0x400002)
    assert icccm.wm_transient_for_get(conn, WIN) == 0x400002


def test_protocols_round_trip(conn):
    names = ["WM_DELETE_WINDOW", "WM_TAKE_FOCUS"]
    icccm.wm_protocols_set(conn, WIN, names)
    assert icccm.wm_protocols_get(conn, WIN) == names
    assert conn.atom_name(conn.get_property(WIN, "WM_PROTOCOLS").type) == "ATOM"


def test_colormap_windows_round_trip(conn):
    icccm.wm_colormap_windows_set(conn, WIN, [0x10, 0x20, 0x30])
    assert icccm.wm_colormap_windows_get(conn, WIN) == [0x10, 0x20, 0x30]


def test_client_machine_round_trip(conn):
    icccm.wm_client_machine_set(conn, WIN, "host.example.com")
    assert icccm.wm_client_machine_get(conn, WIN) == "host.example.com"


def test_wm_state_round_trip(conn):
    icccm.wm_state_set(conn, WIN, icccm.WmState(icccm.WindowState.NORMAL))
    got = icccm.wm_state_get(conn, WIN)
    assert got.state == icccm.WindowState.NORMAL
    assert got.icon == 0


def test_wm_state_wrong_length(conn):
    change_prop32(conn, WIN, "WM_STATE", "WM_STATE", 1)
    with pytest.raises(PropertyError):
        icccm.wm_state_get(conn, WIN)


def test_icon_size_round_trip(conn):
    size = icccm.IconSize(16, 16, 64, 64, 16, 16)
    icccm.wm_icon_size_set(conn, WIN, size)
    assert icccm.wm_icon_size_get(conn, WIN) == size


def test_icon_size_wrong_length(conn):
    change_prop32(conn, WIN, "WM_ICON_SIZE", "WM_ICON_SIZE", 1, 2, 3, 4, 5)
    with pytest.raises(PropertyError):
        icccm.wm_icon_size_get(conn, WIN)


def _protocol_message(conn, protocol, fmt=32, type_name="WM_PROTOCOLS"):
    return new_client_message(
        fmt, WIN, atom(conn, type_name, False), atom(conn, protocol, False)
    )


def test_is_delete_protocol(conn):
    ev = _protocol_message(conn, "WM_DELETE_WINDOW")
    assert icccm.is_delete_protocol(conn, ev) is True
    assert icccm.is_focus_protocol(conn, ev) is False


def test_is_focus_protocol(conn):
    ev = _protocol_message(conn, "WM_TAKE_FOCUS")
    assert icccm.is_focus_protocol(conn, ev) is True
    assert icccm.is_delete_protocol(conn, ev) is False


def test_protocol_rejects_wrong_format(conn):
    ev = _protocol_message(conn, "WM_DELETE_WINDOW", fmt=16)
    assert icccm.is_delete_protocol(conn, ev) is False


def test_protocol_rejects_wrong_type(conn):
    ev = _protocol_message(conn, "WM_DELETE_WINDOW", type_name="NOOP")
    assert icccm.is_delete_protocol(conn, ev) is False


def test_protocol_rejects_unknown_atom(conn):
    ev = new_client_message(32, WIN, atom(conn, "WM_PROTOCOLS", False), 0)
    assert icccm.is_delete_protocol(conn, ev) is False
    assert icccm.is_focus_protocol(conn, ev) is False