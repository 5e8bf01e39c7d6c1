"""Framed exchange of telemetry and commands with the plate controller."""

from __future__ import annotations

from contextlib import suppress

from .protocol import END_CHAR, Telemetry, parse_telemetry
from .serialport import BaudRate, SerialPort, SerialPortError

_HANDSHAKE_REQUEST = "S"
_HANDSHAKE_REPLY = b"R"
_FINISH = "F"
_HANDSHAKE_WAIT_MS = 100


class CommunicationError(Exception):
    """Raised when the controller link is unusable or sends a bad frame."""


class Communication:
    """A serial link to the plate controller holding its latest reading."""

    def __init__(self, port_name: str = "", baud_rate=BaudRate.BR_9600, port=None):
        self.port = port if port is not None else SerialPort(port_name, baud_rate)
        self.telemetry = Telemetry()
        self.error: SerialPortError | None = None
        self.is_ready = self._check_connection()

    def _check_connection(self) -> bool:
        try:
            self.port.open()
            self.port.prepare()
        except SerialPortError as exc:
            self.error = exc
            return False
        return True

    def _require_port(self) -> SerialPort:
        if self.port is None:
            raise CommunicationError("connection is closed")
        return self.port

    @property
    def x_motor_angle(self) -> int:
        return self.telemetry.x_motor_angle

    @property
    def y_motor_angle(self) -> int:
        return self.telemetry.y_motor_angle

    @property
    def ball_x(self) -> int:
        return self.telemetry.ball_x

    @property
    def ball_y(self) -> int:
        return self.telemetry.ball_y

    def handshake(self) -> bool:
        """Send requests until the controller answers that it is ready."""
        port = self._require_port()
        while True:
            port.write(_HANDSHAKE_REQUEST)
            SerialPort.wait(_HANDSHAKE_WAIT_MS)
            if port.read() == _HANDSHAKE_REPLY:
                break
        self.is_ready = True
        return True

    def write(self, data) -> int:
        """Send a command string or bytes; return the number of bytes sent."""
        return self._require_port().write(data)

    def read_until(self) -> Telemetry:
        """Read one frame up to the end character and store its values."""
        text = self._require_port().read_until(END_CHAR)
        try:
            telemetry = parse_telemetry(text)
        except ValueError as exc:
            raise CommunicationError(str(exc)) from exc
        self.telemetry = telemetry
        return telemetry

    def close_connection(self) -> None:
        """Tell the controller the session is over and release the port."""
        if self.port is not None:
            with suppress(SerialPortError):
                self.port.write(_FINISH)
            self.port.close()
            self.port = None
        self.is_ready = False