"""Core types and abstract interfaces for Bluetooth LE centrals and peripherals."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Hashable, Iterable
from dataclasses import dataclass, field
from uuid import UUID

from .bdaddr import BDAddr


class AddressType(enum.Enum):
    """Whether a device address is public or randomly generated."""

    RANDOM = "random"
    PUBLIC = "public"

    @classmethod
    def default(cls) -> AddressType:
        """The address type assumed when none is known."""
        return cls.PUBLIC

    @classmethod
    def from_str(cls, value: str) -> AddressType | None:
        """Map ``"public"`` or ``"random"`` to an address type, else None."""
        return {"public": cls.PUBLIC, "random": cls.RANDOM}.get(value)

    @classmethod
    def from_u8(cls, value: int) -> AddressType | None:
        """Map the numeric code 1 (public) or 2 (random) to an address type, else None."""
        return {1: cls.PUBLIC, 2: cls.RANDOM}.get(value)

    def num(self) -> int:
        """Return the numeric code of this address type."""
        return 1 if self is AddressType.PUBLIC else 2


@dataclass(frozen=True)
class ValueNotification:
    """A notification sent by a peripheral when a characteristic value changes."""

    uuid: UUID
    value: bytes


class CharPropFlags(enum.IntFlag):
    """Operations supported by a characteristic."""

    BROADCAST = 0x01
    READ = 0x02
    WRITE_WITHOUT_RESPONSE = 0x04
    WRITE = 0x08
    NOTIFY = 0x10
    INDICATE = 0x20
    AUTHENTICATED_SIGNED_WRITES = 0x40
    EXTENDED_PROPERTIES = 0x80

    def __repr__(self) -> str:
        cls = type(self)
        names = [m.name for m in cls if m.value and (self & m) == m]
        if not names:
            return f"{cls.__name__}({int(self):#x})"
        return f"{cls.__name__}({' | '.join(names)})"


@dataclass(frozen=True, order=True)
class Descriptor:
    """A descriptor attached to a characteristic."""

    uuid: UUID
    service_uuid: UUID
    characteristic_uuid: UUID

    def __str__(self) -> str:
        return f"uuid: {self.uuid}"


@dataclass(frozen=True, order=True)
class Characteristic:
    """A GATT characteristic; descriptors are kept sorted and unique."""

    uuid: UUID
    service_uuid: UUID
    properties: CharPropFlags = CharPropFlags(0)
    descriptors: tuple[Descriptor, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", CharPropFlags(self.properties))
        object.__setattr__(self, "descriptors", tuple(sorted(set(self.descriptors))))

    def __str__(self) -> str:
        return f"uuid: {self.uuid}, char properties: {self.properties!r}"


@dataclass(frozen=True, order=True)
class Service:
    """A GATT service: a group of characteristics, kept sorted and unique."""

    uuid: UUID
    primary: bool
    characteristics: tuple[Characteristic, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "characteristics", tuple(sorted(set(self.characteristics)))
        )


@dataclass
class PeripheralProperties:
    """What the advertising reports received so far say about a peripheral."""

    address: BDAddr = field(default_factory=BDAddr)
    address_type: AddressType | None = None
    local_name: str | None = None
    tx_power_level: int | None = None
    rssi: int | None = None
    manufacturer_data: dict[int, bytes] = field(default_factory=dict)
    service_data: dict[UUID, bytes] = field(default_factory=dict)
    services: list[UUID] = field(default_factory=list)
    class_: int | None = None


@dataclass
class ScanFilter:
    """Restricts a scan to devices advertising at least one of ``services``."""

    services: list[UUID] = field(default_factory=list)


class WriteType(enum.Enum):
    """How a characteristic write is performed."""

    WITH_RESPONSE = "with_response"
    WITHOUT_RESPONSE = "without_response"


class CentralState(enum.IntEnum):
    """Power state of a central adapter."""

    UNKNOWN = 0
    POWERED_ON = 1
    POWERED_OFF = 2


class CentralEvent:
    """Base class of every event a central emits."""

    __slots__ = ()


@dataclass(frozen=True)
class DeviceDiscovered(CentralEvent):
    id: Hashable


@dataclass(frozen=True)
class DeviceUpdated(CentralEvent):
    id: Hashable


@dataclass(frozen=True)
class DeviceConnected(CentralEvent):
    id: Hashable


@dataclass(frozen=True)
class DeviceDisconnected(CentralEvent):
    id: Hashable


@dataclass(frozen=True)
class ManufacturerDataAdvertisement(CentralEvent):
    """Manufacturer data was advertised by a device."""

    id: Hashable
    manufacturer_data: dict[int, bytes]


@dataclass(frozen=True)
class ServiceDataAdvertisement(CentralEvent):
    """Service data was advertised by a device."""

    id: Hashable
    service_data: dict[UUID, bytes]


@dataclass(frozen=True)
class ServicesAdvertisement(CentralEvent):
    """The advertised services of a device were updated."""

    id: Hashable
    services: list[UUID]


@dataclass(frozen=True)
class StateUpdate(CentralEvent):
    state: CentralState


class Peripheral(ABC):
    """A remote device (the BLE server) and the operations it supports."""

    @abstractmethod
    def id(self) -> Hashable:
        """Unique identifier of the peripheral."""

    @abstractmethod
    def address(self) -> BDAddr:
        """MAC address of the peripheral."""

    @abstractmethod
    async def properties(self) -> PeripheralProperties | None:
        """Properties gathered from advertising reports."""

    @abstractmethod
    def services(self) -> Iterable[Service]:
        """Services discovered so far; empty until ``discover_services``."""

    def characteristics(self) -> list[Characteristic]:
        """All characteristics of all discovered services, sorted and unique."""
        return sorted({c for service in self.services() for c in service.characteristics})

    @abstractmethod
    async def is_connected(self) -> bool:
        """Whether the peripheral is currently connected."""

    @abstractmethod
    async def connect(self) -> None:
        """Connect to the peripheral."""

    @abstractmethod
    async def disconnect(self) -> None:
        """Terminate the connection."""

    @abstractmethod
    async def discover_services(self) -> None:
        """Discover all services and their characteristics."""

    @abstractmethod
    async def write(
        self, characteristic: Characteristic, data: bytes, write_type: WriteType
    ) -> None:
        """Write ``data`` to a characteristic."""

    @abstractmethod
    async def read(self, characteristic: Characteristic) -> bytes:
        """Read the value of a characteristic."""

    @abstractmethod
    async def subscribe(self, characteristic: Characteristic) -> None:
        """Enable notify or indicate for a characteristic."""

    @abstractmethod
    async def unsubscribe(self, characteristic: Characteristic) -> None:
        """Disable notify or indicate for a characteristic."""

    @abstractmethod
    async def notifications(self) -> AsyncIterator[ValueNotification]:
        """Stream of value notifications, valid across connections."""

    @abstractmethod
    async def write_descriptor(self, descriptor: Descriptor, data: bytes) -> None:
        """Write ``data`` to a descriptor."""

    @abstractmethod
    async def read_descriptor(self, descriptor: Descriptor) -> bytes:
        """Read the value of a descriptor."""


class Central(ABC):
    """The BLE client: scans for and connects to peripherals."""

    @abstractmethod
    async def events(self) -> AsyncIterator[CentralEvent]:
        """Stream of events happening on this central."""

    @abstractmethod
    async def start_scan(self, scan_filter: ScanFilter) -> None:
        """Start scanning for devices."""

    @abstractmethod
    async def stop_scan(self) -> None:
        """Stop scanning."""

    @abstractmethod
    async def peripherals(self) -> list[Peripheral]:
        """Peripherals discovered so far."""

    @abstractmethod
    async def peripheral(self, peripheral_id: Hashable) -> Peripheral:
        """A discovered peripheral by its id."""

    @abstractmethod
    async def add_peripheral(self, peripheral_id: Hashable) -> Peripheral:
        """Add a peripheral without a scan result."""

    @abstractmethod
    async def adapter_info(self) -> str:
        """Human-readable information about the adapter."""

    @abstractmethod
    async def adapter_state(self) -> CentralState:
        """Power state of the adapter."""


class Manager(ABC):
    """Entry point giving access to the Bluetooth adapters of the system."""

    @abstractmethod
    async def adapters(self) -> list[Central]:
        """All adapters available."""