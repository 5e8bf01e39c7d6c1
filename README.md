# ballplate

A library for talking to a ball-and-plate balancing rig driven by a
microcontroller over a serial line. It reads the ball position and servo
angles the board reports, sends PID gains and game modes back to the board,
and provides the worker loops that relay readings to whatever displays them.

## Installation

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Wire format

The board sends telemetry frames of the form

```
{X<x-angle>Y<y-angle>x<ball-x>y<ball-y>}
```

which `ballplate.protocol.parse_telemetry` turns into a `Telemetry` value
(it raises `ValueError` on a malformed frame). Commands going the other way
are built with:

- `pid_command(axis, kp, ki, kd)`: for example `pid_command("X", 1, 2, 3)`
  gives `X 1 2 3`; the axis must be `"X"` or `"Y"`
- `mode_command(mode)`: takes a `Mode` (`CENTER`, `CIRCLE`, `SQUARE`,
  `LIGHT_GAME`) or its number and gives `M C`, `M O`, `M S` or `M L`

`simulation_packet(ball_x, ball_y, motor_x, motor_y)` builds the 30-byte,
NUL-padded frame meant for a 3D simulation, such as `C{ 200 150 90 90 }`.
`format_info_packet` and `parse_info_packet` convert an `InfoPacket` to and
from text, and `map_range` rescales a value linearly between two ranges.

## Library use

```python
from ballplate.communication import Communication
from ballplate.serialport import BaudRate

com = Communication("/dev/ttyUSB0", BaudRate.BR_9600)
if com.is_ready:
    telemetry = com.read_until()
    print(telemetry.ball_x, telemetry.ball_y)
    com.write("M C")
com.close_connection()
```

`Communication` opens and configures the port when it is created; if that
fails, `is_ready` is false and `error` holds the `SerialPortError`.
`read_until` raises `CommunicationError` on a bad frame, and
`close_connection` sends `F` to the board before releasing the port.

The modules are:

- `ballplate.serialport`: `SerialPort`, a serial line set up as raw 8N1
  without flow control, usable as a context manager; it raises
  `SerialPortError` on failure. `BaudRate` lists the supported speeds.
- `ballplate.protocol`: frame parsing and command building, plus the
  `ArduinoMessage` and `SimulationMessage` state records.
- `ballplate.communication`: `Communication`, the framed link to the board.
- `ballplate.arduino`: `ArduinoWorker`, whose `run` loop reads telemetry and
  calls `on_servo(mx, my)` and `on_position(bx, by)` at most every
  0.05 seconds; `update_x_pid`, `update_y_pid` and `change_mode` send
  commands while it runs, and `handle_request` answers simulation requests
  (`0` calls `on_terminate_simulation`, `1` calls `on_ready_send` once
  `started` has been called).
- `ballplate.graphic`: `GraphicTicker`, which calls a callback every
  `interval` seconds (0.02 by default) until `terminate` is called.

Both worker loops block; run them in a `threading.Thread` of your own.

## What it does not do

The package has no command-line program and no window: there are no plots
or buttons, and the callbacks are left for the caller to connect to a
display. It also has no TCP server for the 3D simulation; it only builds the
frames such a server would send.