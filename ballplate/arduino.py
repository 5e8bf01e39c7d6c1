"""Worker that reads the plate controller and forwards its readings."""

from __future__ import annotations

import threading
import time

from .communication import Communication, CommunicationError
from .protocol import ArduinoMessage, Mode, Telemetry, mode_command, pid_command

_TERMINATE_SIMULATION = 0
_SEND_TO_SIMULATION = 1


def _call(callback, *args) -> None:
    if callback is not None:
        callback(*args)


class ArduinoWorker:
    """Reads telemetry in a loop and relays commands to the controller."""

    emit_interval = 0.05

    def __init__(
        self,
        message=None,
        communication_factory=Communication,
        on_servo=None,
        on_position=None,
        on_ready_send=None,
        on_terminate_simulation=None,
    ):
        self.message = message if message is not None else ArduinoMessage()
        self._factory = communication_factory
        self._on_servo = on_servo
        self._on_position = on_position
        self._on_ready_send = on_ready_send
        self._on_terminate_simulation = on_terminate_simulation
        self.mode = Mode.CENTER
        self.sim3d_started = False
        self._alive = False
        self._lock = threading.Lock()
        self._com = None

    @property
    def is_alive(self) -> bool:
        with self._lock:
            return self._alive

    def run(self) -> None:
        """Connect, then read and publish readings until terminated."""
        with self._lock:
            self._alive = True
        com = self._factory(self.message.port_name, self.message.baud_rate)
        if not com.is_ready:
            with self._lock:
                self._alive = False
            return
        with self._lock:
            self._com = com
        last_emit = time.monotonic()
        have_reading = False
        try:
            while self.is_alive:
                try:
                    telemetry = com.read_until()
                except CommunicationError:
                    pass
                else:
                    self._store(telemetry)
                    have_reading = True
                now = time.monotonic()
                if have_reading and now - last_emit > self.emit_interval:
                    last_emit = now
                    msg = self.message
                    _call(self._on_servo, msg.motor_x_angle, msg.motor_y_angle)
                    _call(self._on_position, msg.ball_x, msg.ball_y)
        finally:
            with self._lock:
                self._com = None
                self._alive = False
            com.close_connection()

    def _store(self, telemetry: Telemetry) -> None:
        self.message.ball_x = telemetry.ball_x
        self.message.ball_y = telemetry.ball_y
        self.message.motor_x_angle = telemetry.x_motor_angle
        self.message.motor_y_angle = telemetry.y_motor_angle

    def terminate(self) -> None:
        """Ask the reading loop to stop."""
        with self._lock:
            self._alive = False

    def _write(self, command: str) -> None:
        with self._lock:
            if self._com is None:
                raise CommunicationError("controller is not connected")
            self._com.write(command)

    def update_x_pid(self, kp, ki, kd) -> None:
        self._write(pid_command("X", kp, ki, kd))

    def update_y_pid(self, kp, ki, kd) -> None:
        self._write(pid_command("Y", kp, ki, kd))

    def change_mode(self, mode) -> None:
        """Switch the controller to another operating mode."""
        self._write(mode_command(mode))
        self.mode = Mode(mode)

    def started(self) -> None:
        """Note that the 3D simulation has been started."""
        self.sim3d_started = True

    def handle_request(self, mode) -> None:
        """Answer a request coming from the 3D simulation."""
        if mode == _TERMINATE_SIMULATION:
            _call(self._on_terminate_simulation)
        elif mode == _SEND_TO_SIMULATION and self.sim3d_started:
            msg = self.message
            _call(
                self._on_ready_send,
                msg.ball_x,
                msg.ball_y,
                msg.motor_x_angle,
                msg.motor_y_angle,
            )