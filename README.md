# bleapi

Building blocks for Bluetooth Low Energy client code in Python. The package
gives you the common types and plumbing that a backend for a particular
platform builds on:

- `bleapi.bdaddr`: `BDAddr`, the 6-byte Bluetooth device address. It parses,
  formats, and converts to and from bytes and integers. Helper functions
  serialise it in three formats: colon-separated upper-case hex
  (`serialize_colon_delim` / `deserialize_colon_delim`), undelimited
  lower-case hex (`serialize_no_delim` / `deserialize_no_delim`) and a list
  of six integers (`serialize_bytes` / `deserialize_bytes`).
- `bleapi.bleuuid`: converts between full 128-bit UUIDs and the 16- and 32-bit
  short UUIDs built on the Bluetooth Base UUID.
- `bleapi.api`: GATT models (`Service`, `Characteristic`, `Descriptor`,
  `CharPropFlags`), `AddressType`, `ValueNotification`,
  `PeripheralProperties`, `ScanFilter`, `WriteType`, `CentralState`, the
  `CentralEvent` family (`DeviceDiscovered`, `DeviceUpdated`,
  `DeviceConnected`, `DeviceDisconnected`, `ManufacturerDataAdvertisement`,
  `ServiceDataAdvertisement`, `ServicesAdvertisement`, `StateUpdate`), and
  the abstract `Peripheral`, `Central` and `Manager` interfaces.
- `bleapi.broadcast`: `Broadcast`, a bounded, multi-subscriber asyncio
  broadcast channel. Each `Receiver` gets every message sent after it
  subscribed; one that falls behind gets a `LaggedError` and skips what it
  missed. `stream_from_receiver` turns a receiver into an async iterator that
  passes over lag errors.
- `bleapi.adapter_manager`: `AdapterManager`. It keeps track of the
  peripherals an adapter has discovered and sends central events to every
  listener.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Addresses

```python
from bleapi.bdaddr import BDAddr

addr = BDAddr.parse("00:11:22:33:44:55")   # also accepts "001122334455"
str(addr)                  # "00:11:22:33:44:55"
format(addr, "x")          # "00:11:22:33:44:55" in lower case
addr.to_string_no_delim()  # "001122334455"
addr.to_int()              # 0x001122334455
BDAddr.from_int(0x001122334455) == addr
```

If a string or integer does not describe exactly six bytes, parsing raises
`IncorrectByteCountError`. If the text has a part that is not a hex byte, it
raises `InvalidDigitError`. Both are subclasses of `ParseBDAddrError`, which
is a `ValueError`.

## Short UUIDs

```python
from bleapi.bleuuid import uuid_from_u16, to_ble_u16, to_short_string

uuid = uuid_from_u16(0x180D)   # 0000180d-0000-1000-8000-00805f9b34fb
to_ble_u16(uuid)               # 0x180D
to_short_string(uuid)          # "0x180d"
```

`to_ble_u16` and `to_ble_u32` return `None` for UUIDs that have no short form.

## Events

```python
from bleapi.adapter_manager import AdapterManager
from bleapi.api import DeviceDiscovered

manager = AdapterManager()
stream = manager.event_stream()
manager.emit(DeviceDiscovered("some-device"))
event = await anext(stream)
```

Events emitted while no stream is listening are dropped and logged at debug
level. Peripherals are registered with `add_peripheral` (they must have an
`id()` method), looked up with `peripheral` and `peripherals`, and changed
under the manager's lock with `update_peripheral`. A `DeviceDisconnected`
event removes the peripheral, except on macOS; pass `remove_on_disconnect`
to choose explicitly.

## What it does not do

The package does not talk to any Bluetooth hardware and ships no backend for
any operating system. `Peripheral`, `Central` and `Manager` are abstract: to
scan, connect or read characteristics, subclass them and implement their
abstract methods for your platform.