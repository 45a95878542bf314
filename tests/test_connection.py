import pytest

from wmhints.connection import (
    ROOT_EVENT_MASK,
    ClientMessage,
    PropertyError,
    PropertyReply,
    XConnection,
    atom,
    change_prop,
    change_prop32,
    client_event,
    new_client_message,
    prop_val_atoms,
    prop_val_num,
    prop_val_nums,
    prop_val_str,
    prop_val_strs,
    prop_val_window,
    prop_val_windows,
    str_to_atoms,
)


@pytest.fixture
def conn():
    return XConnection(root=0x100)


def test_root_window(conn):
    assert conn.root_window() == 0x100


def test_predefined_atoms_follow_protocol(conn):
    assert conn.intern_atom("WM_NAME", True) == 39
    assert conn.atom_name(39) == "WM_NAME"


def test_intern_atom_creates_and_is_stable(conn):
    first = conn.intern_atom("_NET_WM_NAME", False)
    again = conn.intern_atom("_NET_WM_NAME", True)
    assert first == again
    assert conn.atom_name(first) == "_NET_WM_NAME"


def test_intern_atom_only_if_exists_returns_zero(conn):
    assert conn.intern_atom("_MISSING_ATOM", True) == 0


def test_atom_raises_for_missing(conn):
    with pytest.raises(PropertyError):
        atom(conn, "_MISSING_ATOM", True)


def test_atom_name_unknown_raises(conn):
    with pytest.raises(PropertyError):
        conn.atom_name(999999)


def test_get_missing_property_raises(conn):
    with pytest.raises(PropertyError):
        conn.get_property(0x200, "_NET_WM_PID")


def test_change_prop32_round_trip(conn):
    change_prop32(conn, 0x200, "_NET_WM_DESKTOP", "CARDINAL", 3, 7, 11)
    reply = conn.get_property(0x200, "_NET_WM_DESKTOP")
    assert reply.format == 32
    assert reply.type == conn.intern_atom("CARDINAL", True)
    assert prop_val_nums(reply) == [3, 7, 11]
    assert prop_val_num(reply) == 3


def test_change_prop32_wraps_negative(conn):
    change_prop32(conn, 0x200, "X", "CARDINAL", -1)
    assert prop_val_num(conn.get_property(0x200, "X")) == 0xFFFFFFFF


def test_windows_round_trip(conn):
    change_prop32(conn, conn.root_window(), "_NET_CLIENT_LIST", "WINDOW", 5, 9)
    reply = conn.get_property(conn.root_window(), "_NET_CLIENT_LIST")
    assert prop_val_windows(reply) == [5, 9]
    assert prop_val_window(reply) == 5


def test_prop_val_num_empty_raises(conn):
    change_prop32(conn, 0x200, "EMPTY", "CARDINAL")
    with pytest.raises(PropertyError):
        prop_val_num(conn.get_property(0x200, "EMPTY"))


def test_format_mismatch_raises(conn):
    change_prop(conn, 0x200, 8, "WM_NAME", "STRING", b"xterm")
    with pytest.raises(PropertyError):
        prop_val_nums(conn.get_property(0x200, "WM_NAME"))


def test_string_round_trip(conn):
    change_prop(conn, 0x200, 8, "_NET_WM_NAME", "UTF8_STRING", "héllo".encode())
    assert prop_val_str(conn.get_property(0x200, "_NET_WM_NAME")) == "héllo"


def test_prop_val_str_rejects_32bit(conn):
    change_prop32(conn, 0x200, "N", "CARDINAL", 1)
    with pytest.raises(PropertyError):
        prop_val_str(conn.get_property(0x200, "N"))


@pytest.mark.parametrize(
    "raw, expected",
    [
        (b"one\0two\0", ["one", "two"]),
        (b"one\0two", ["one", "two"]),
        (b"a\0\0b\0", ["a", "", "b"]),
        (b"", []),
    ],
)
def test_prop_val_strs(raw, expected):
    assert prop_val_strs(PropertyReply(8, 31, raw)) == expected


def test_atoms_round_trip(conn):
    names = ["_NET_WM_STATE_ABOVE", "_NET_WM_STATE_STICKY"]
    atoms = str_to_atoms(conn, names)
    change_prop32(conn, 0x200, "_NET_WM_STATE", "ATOM", *atoms)
    assert prop_val_atoms(conn, conn.get_property(0x200, "_NET_WM_STATE")) == names


def test_change_property_bad_format(conn):
    with pytest.raises(ValueError):
        conn.change_property(0x200, 12, "X", "CARDINAL", b"\0\0")


def test_change_property_bad_length(conn):
    with pytest.raises(ValueError):
        conn.change_property(0x200, 32, "X", "CARDINAL", b"\0\0\0")


def test_change_property_replaces(conn):
    change_prop32(conn, 0x200, "X", "CARDINAL", 1)
    change_prop32(conn, 0x200, "X", "CARDINAL", 2)
    assert prop_val_nums(conn.get_property(0x200, "X")) == [2]


def test_new_client_message_pads():
    msg = new_client_message(32, 0x200, 40, 1, 2)
    assert msg == ClientMessage(32, 0x200, 40, (1, 2, 0, 0, 0))


def test_new_client_message_format8_slots():
    msg = new_client_message(8, 0x200, 40, 1)
    assert len(msg.data) == 20
    assert msg.data[0] == 1
    assert sum(msg.data[1:]) == 0


def test_new_client_message_too_many():
    with pytest.raises(ValueError):
        new_client_message(32, 0x200, 40, 1, 2, 3, 4, 5, 6)


def test_new_client_message_bad_format():
    with pytest.raises(ValueError):
        new_client_message(24, 0x200, 40)


def test_new_client_message_bad_type():
    with pytest.raises(TypeError):
        new_client_message(32, 0x200, 40, "x")


def test_client_event_goes_to_root(conn):
    client_event(conn, 0x200, "_NET_ACTIVE_WINDOW", 2, 0, 0)
    assert len(conn.sent_events) == 1
    target, message, mask = conn.sent_events[0]
    assert target == conn.root_window()
    assert mask == ROOT_EVENT_MASK
    assert message.window == 0x200
    assert message.format == 32
    assert conn.atom_name(message.type) == "_NET_ACTIVE_WINDOW"
    assert message.data == (2, 0, 0, 0, 0)


def test_client_event_uses_substructure_mask_bits(conn):
    client_event(conn, conn.root_window(), "_NET_NUMBER_OF_DESKTOPS", 4)
    _, _, mask = conn.sent_events[-1]
    assert mask == 0x180000