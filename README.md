# wmhints

`wmhints` gets and sets the window properties defined by the two X11 window
manager conventions. It also builds the client messages that ask a window
manager to act:

* **EWMH** (Extended Window Manager Hints): `_NET_ACTIVE_WINDOW`,
  `_NET_CLIENT_LIST`, `_NET_WM_NAME`, `_NET_WM_STATE`, `_NET_WM_STRUT_PARTIAL`,
  `_NET_WORKAREA` and the rest.
* **ICCCM**: `WM_NAME`, `WM_CLASS`, `WM_HINTS`, `WM_NORMAL_HINTS`, `WM_STATE`,
  `WM_PROTOCOLS` and others. It also recognises `WM_DELETE_WINDOW` and
  `WM_TAKE_FOCUS` client messages.

The package has no runtime dependencies.

## The connection

Every function takes a connection object, `conn`. The package provides
`wmhints.connection.XConnection`, an in-memory model of an X server. It holds
atoms (the predefined ones are already interned), window properties and the
client messages that were sent. It offers six operations, and the hint
functions use nothing else:

* `root_window()` returns the root window id (the `root` field, 1 by default).
* `intern_atom(name, only_if_exists)` returns an atom. It creates the atom
  unless `only_if_exists` is true, in which case it returns 0 for an unknown
  name.
* `atom_name(atom)` returns an atom's name.
* `get_property(window, name)` returns a `PropertyReply` (`format`, `type`,
  `value`).
* `change_property(window, fmt, name, type_name, data)` replaces a property.
  The format must be 8, 16 or 32.
* `send_event(window, event, mask)` records a `ClientMessage` in
  `sent_events` as a `(window, event, mask)` tuple.

A subclass that overrides these six methods can route the same calls
somewhere else.

`wmhints.connection` also has the helpers the other modules are built on:

* `atom`, `str_to_atoms`
* the decoders `prop_val_num`, `prop_val_nums`, `prop_val_window`,
  `prop_val_windows`, `prop_val_str`, `prop_val_strs` and `prop_val_atoms`
* `change_prop` and `change_prop32`
* `new_client_message`, which builds a message
* `client_event`, which sends a 32-bit `ClientMessage` to the root window with
  the substructure notify and redirect mask

## Modules

| Module                 | Covers                                                      |
|------------------------|-------------------------------------------------------------|
| `wmhints.connection`   | the in-memory connection, property decoding, client messages |
| `wmhints.icccm`        | ICCCM properties and protocol checks                        |
| `wmhints.ewmh_root`    | EWMH properties kept on the root window                     |
| `wmhints.ewmh_client`  | EWMH properties kept on client windows, and `get_ewmh_wm`   |

## Naming

Each property has functions named after it:

* `*_get` reads the property.
* `*_set` writes the property.
* `*_req` sends a client message asking the window manager to make the
  change. It uses default values for the less common parameters, such as
  source indication 2.
* `*_req_extra` sends the same message and takes every parameter.

Some EWMH messages have no property behind them, so their functions drop the
suffix: `close_window`, `moveresize_window`, `move_window`, `resize_window`,
`restack_window`, `request_frame_extents`, `wm_ping`, `wm_moveresize` and
`wm_sync_request`. Most of these have an `_extra` form.

Structured properties come back as dataclasses:

* in `ewmh_root`: `DesktopGeometry`, `DesktopLayout`, `DesktopViewport`,
  `FrameExtents` and `Workarea`
* in `ewmh_client`: `WmIcon`, `WmStrut`, `WmStrutPartial` and others
* in `icccm`: `NormalHints`, `Hints`, `WmClass`, `WmState` and `IconSize`

Flag bits and enumerations are `Hint`, `SizeHint` and `WindowState` in
`icccm`, `Orientation` and `Corner` in `ewmh_root`, and `MoveResizeDirection`
and `StateAction` in `ewmh_client`.

A missing property, or one that holds the wrong format or too few values,
raises `PropertyError`.

## Example

```python
from wmhints import ewmh_client, ewmh_root, icccm
from wmhints.connection import XConnection, atom, new_client_message

conn = XConnection()
root = conn.root_window()

# A window manager announces itself.
wm = 0x200
ewmh_root.supporting_wm_check_set(conn, root, wm)
ewmh_root.supporting_wm_check_set(conn, wm, wm)
ewmh_client.wm_name_set(conn, wm, "examplewm")
print(ewmh_client.get_ewmh_wm(conn))          # examplewm

# Client list and names.
ewmh_root.client_list_set(conn, [0x300])
icccm.wm_class_set(conn, 0x300, icccm.WmClass("xterm", "XTerm"))
print(ewmh_root.client_list_get(conn))        # [768]
print(icccm.wm_class_get(conn, 0x300))        # WmClass(instance='xterm', class_name='XTerm')

# Ask for fullscreen to be toggled; the message is recorded on the connection.
ewmh_client.wm_state_req(
    conn, 0x300, ewmh_client.StateAction.TOGGLE, "_NET_WM_STATE_FULLSCREEN"
)
target, message, mask = conn.sent_events[-1]
print(target == root, message.data[0])        # True 2

# Recognise a graceful close request.
event = new_client_message(
    32, 0x300,
    atom(conn, "WM_PROTOCOLS", False),
    atom(conn, "WM_DELETE_WINDOW", False),
)
print(icccm.is_delete_protocol(conn, event))  # True
```

## What it does not do

`wmhints` does not connect to an X server, open a display, or run an event
loop. Properties and messages live in the `XConnection` object you create,
and receiving and dispatching events is up to the caller.