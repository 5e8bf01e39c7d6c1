"""Wire formats exchanged with the plate controller and the 3D simulation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum

from .serialport import BaudRate

START_CHAR = "{"
END_CHAR = "}"
PACKET_SIZE = 25

X_MOTOR_START = "X"
Y_MOTOR_START = "Y"
BALL_X_COORDINATE = "x"
BALL_Y_COORDINATE = "y"

X_COORD_MAX = 940
X_COORD_MIN = 140
Y_COORD_MAX = 960
Y_COORD_MIN = 130
X_OUT_MAX = 400
X_OUT_MIN = 0
Y_OUT_MAX = 400
Y_OUT_MIN = 0

UNKNOWN_READING = 999

THREAD_COM_SIZE = 6
NONE = "none"
PRESSED = "pres"
READY = "ready"
QUIT = "quit"
SIMULATION_EXECUTABLE = "3dsim.exe"
INFO_PACKET_FORMAT = "{ %3.2f %3.2f %3d %3d}"

SIMULATION_PACKET_SIZE = 30

_INT = r"\s*([+-]?\d+)(?!\d)"
_TELEMETRY_RE = re.compile(
    r"(.)(.)" + _INT + r"(.)" + _INT + r"(.)" + _INT + r"(.)" + _INT,
    re.DOTALL,
)
_FLOAT = r"\s*([+-]?(?:\d+\.?\d*|\.\d+))"
_INFO_RE = re.compile(
    r"\{" + _FLOAT + _FLOAT + r"\s*([+-]?\d+)\s*([+-]?\d+)\s*\}"
)


@dataclass
class Telemetry:
    """One reading sent by the plate controller."""

    x_motor_angle: int = UNKNOWN_READING
    y_motor_angle: int = UNKNOWN_READING
    ball_x: int = UNKNOWN_READING
    ball_y: int = UNKNOWN_READING


class Mode(IntEnum):
    """Operating modes the controller can be switched to."""

    CENTER = 1
    CIRCLE = 2
    SQUARE = 3
    LIGHT_GAME = 4

    @property
    def letter(self) -> str:
        return _MODE_LETTERS[self]


_MODE_LETTERS = {
    Mode.CENTER: "C",
    Mode.CIRCLE: "O",
    Mode.SQUARE: "S",
    Mode.LIGHT_GAME: "L",
}


@dataclass
class InfoPacket:
    """Packet passed between the worker threads."""

    ball_x: int
    ball_y: int
    motor_x_angle: float
    motor_y_angle: float


@dataclass
class SimulationMessage:
    """State shared with the 3D simulation."""

    ball_x: int = 9999
    ball_y: int = 9999
    motor_x_angle: int = 9999
    motor_y_angle: int = 9999
    ready_data: int = -1


@dataclass
class ArduinoMessage:
    """Connection settings and the last reading from the controller."""

    port_name: str = ""
    baud_rate: BaudRate = field(default=BaudRate.BR_9600)
    ball_x: int = 0
    ball_y: int = 0
    motor_x_angle: int = 0
    motor_y_angle: int = 0


def parse_telemetry(text: str) -> Telemetry:
    """Parse a ``{X<int>Y<int>x<int>y<int>}`` frame.

    The tag characters are consumed positionally, not checked.
    """
    match = _TELEMETRY_RE.match(text)
    if match is None:
        raise ValueError(f"malformed telemetry frame: {text!r}")
    groups = match.groups()
    x_angle, y_angle, ball_x, ball_y = (int(groups[i]) for i in (2, 4, 6, 8))
    return Telemetry(x_angle, y_angle, ball_x, ball_y)


def map_range(x, in_min, in_max, out_min, out_max) -> float:
    """Linearly rescale ``x`` from one range to another."""
    return float(x - in_min) * (out_max - out_min) / float(in_max - in_min) + out_min


def pid_command(axis: str, kp: int, ki: int, kd: int) -> str:
    """Build the command that updates the PID gains of one axis."""
    if axis not in (X_MOTOR_START, Y_MOTOR_START):
        raise ValueError(f"unknown axis: {axis!r}")
    return "%s %d %d %d" % (axis, kp, ki, kd)


def mode_command(mode) -> str:
    """Build the command that switches the controller's mode."""
    try:
        selected = Mode(mode)
    except ValueError:
        raise ValueError(f"unknown mode: {mode!r}") from None
    return f"M {selected.letter}"


def format_info_packet(packet: InfoPacket) -> str:
    """Render a packet with motor angles first, then ball coordinates."""
    return INFO_PACKET_FORMAT % (
        packet.motor_x_angle,
        packet.motor_y_angle,
        packet.ball_x,
        packet.ball_y,
    )


def parse_info_packet(text: str) -> InfoPacket:
    """Parse the text produced by :func:`format_info_packet`."""
    match = _INFO_RE.match(text)
    if match is None:
        raise ValueError(f"malformed info packet: {text!r}")
    motor_x, motor_y, ball_x, ball_y = match.groups()
    return InfoPacket(int(ball_x), int(ball_y), float(motor_x), float(motor_y))


def simulation_packet(ball_x: int, ball_y: int, motor_x: int, motor_y: int) -> bytes:
    """Build the fixed-size, zero-padded frame sent to the simulation."""
    body = ("C{ %d %d %d %d }" % (ball_x, ball_y, motor_x, motor_y)).encode("ascii")
    if len(body) > SIMULATION_PACKET_SIZE:
        raise ValueError("values too large for a simulation packet")
    return body.ljust(SIMULATION_PACKET_SIZE, b"\0")