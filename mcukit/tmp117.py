"""TMP117 temperature sensor read over I2C."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

DEVICE_ADDRESS_GND = 0x48 << 1
"""Bus address with ADD0 tied to ground."""

DEVICE_ADDRESS_VCC = 0x49 << 1
"""Bus address with ADD0 tied to supply."""

DEVICE_ADDRESS_SDA = 0x4A << 1
"""Bus address with ADD0 tied to SDA."""

DEVICE_ADDRESS_SCL = 0x4B << 1
"""Bus address with ADD0 tied to SCL."""

RECEIVE_TIMEOUT_MS = 10


class Register(IntEnum):
    """TMP117 pointer registers."""

    TEMPERATURE = 0x00
    CONFIGURATION = 0x01
    TEMPERATURE_HIGH_LIMIT = 0x02
    TEMPERATURE_LOW_LIMIT = 0x03
    EEPROM_UNLOCK = 0x04
    EEPROM1 = 0x05
    EEPROM2 = 0x06
    TEMPERATURE_OFFSET = 0x07
    EEPROM3 = 0x08
    DEVICE_ID = 0x0F


class I2CBus(Protocol):
    """An I2C master able to read bytes from a device."""

    def receive(self, address: int, length: int, timeout_ms: int) -> bytes:
        """Read ``length`` bytes from the device at ``address``."""


def read_temperature(bus: I2CBus, address: int = DEVICE_ADDRESS_GND) -> float:
    """Read the raw 16-bit big-endian temperature word and return it as a float.

    Raises OSError when the device returns fewer than two bytes.
    """
    data = bytes(bus.receive(address, 2, RECEIVE_TIMEOUT_MS))
    if len(data) < 2:
        raise OSError(f"TMP117 at 0x{address:02X} returned {len(data)} bytes, 2 expected")
    return float(int.from_bytes(data[:2], "big"))