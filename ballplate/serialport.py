"""Serial port access configured for 8N1 raw communication."""

from __future__ import annotations

import time
from enum import IntEnum

import serial


class BaudRate(IntEnum):
    """Supported line speeds."""

    BR_300 = 300
    BR_1200 = 1200
    BR_2400 = 2400
    BR_4800 = 4800
    BR_9600 = 9600
    BR_19200 = 19200
    BR_38400 = 38400
    BR_57600 = 57600
    BR_115200 = 115200


class SerialPortError(OSError):
    """Raised when the serial port cannot be opened, configured or used."""


_READ_TIMEOUT = 2.0


class SerialPort:
    """A serial connection to a device such as ``/dev/ttyUSB0`` or ``COM1``."""

    def __init__(self, port_name: str = "", baud_rate=BaudRate.BR_9600, device=None):
        self.port_name = port_name
        self.baud_rate = BaudRate(baud_rate)
        self._device = device

    @property
    def is_open(self) -> bool:
        return self._device is not None and bool(self._device.is_open)

    def open(self) -> None:
        """Open the port; being open does not mean the link is configured."""
        if self._device is None:
            self._device = serial.Serial()
            self._device.port = self.port_name
        if self._device.is_open:
            return
        try:
            self._device.open()
        except (serial.SerialException, OSError, ValueError) as exc:
            raise SerialPortError(f"unable to open port {self.port_name!r}: {exc}") from exc

    def prepare(self) -> None:
        """Configure the open port for raw 8N1 without flow control."""
        device = self._require_open()
        try:
            device.baudrate = int(self.baud_rate)
            device.bytesize = serial.EIGHTBITS
            device.parity = serial.PARITY_NONE
            device.stopbits = serial.STOPBITS_ONE
            device.xonxoff = False
            device.rtscts = False
            device.dsrdtr = False
            device.timeout = _READ_TIMEOUT
        except (serial.SerialException, OSError, ValueError) as exc:
            raise SerialPortError(f"couldn't set port attributes: {exc}") from exc

    def close(self) -> bool:
        """Close the port; return whether it was open."""
        if not self.is_open:
            return False
        self._device.close()
        return True

    def write(self, data) -> int:
        """Write a string or bytes; return the number of bytes written."""
        device = self._require_open()
        payload = data.encode("latin-1") if isinstance(data, str) else bytes(data)
        try:
            written = device.write(payload)
        except (serial.SerialException, OSError) as exc:
            raise SerialPortError(f"error writing to port: {exc}") from exc
        if written is not None and written != len(payload):
            raise SerialPortError(f"short write: {written} of {len(payload)} bytes")
        return len(payload)

    def read(self) -> bytes:
        """Read one byte; empty bytes on timeout."""
        device = self._require_open()
        try:
            return device.read(1)
        except (serial.SerialException, OSError) as exc:
            raise SerialPortError(f"error reading from port: {exc}") from exc

    def read_until(self, until: str) -> str:
        """Read characters up to and including ``until``, waiting as long as needed."""
        received = []
        while True:
            byte = self.read()
            if not byte:
                continue
            char = byte.decode("latin-1")
            received.append(char)
            if char == until:
                return "".join(received)

    def read_string(self) -> str:
        """Read a NUL-terminated string, terminator included."""
        return self.read_until("\0")

    @staticmethod
    def wait(millisec) -> None:
        """Sleep for the given number of milliseconds."""
        time.sleep(millisec / 1000)

    def _require_open(self):
        if not self.is_open:
            raise SerialPortError("port is not open")
        return self._device

    def __enter__(self) -> "SerialPort":
        self.open()
        self.prepare()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()