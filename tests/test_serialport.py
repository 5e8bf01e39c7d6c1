import pytest
import serial

from ballplate.serialport import BaudRate, SerialPort, SerialPortError


@pytest.fixture
def loop_device():
    device = serial.serial_for_url("loop://", do_not_open=True)
    yield device
    if device.is_open:
        device.close()


@pytest.fixture
def port(loop_device):
    serial_port = SerialPort("loop", BaudRate.BR_115200, device=loop_device)
    serial_port.open()
    serial_port.prepare()
    yield serial_port
    serial_port.close()


@pytest.mark.parametrize("rate", list(BaudRate))
def test_prepare_applies_each_baud_rate(rate, loop_device):
    serial_port = SerialPort("loop", rate, device=loop_device)
    serial_port.open()
    try:
        serial_port.prepare()
        assert serial_port.baud_rate is rate
        assert loop_device.baudrate == int(rate.name[3:])
    finally:
        serial_port.close()


def test_defaults():
    serial_port = SerialPort()
    assert serial_port.port_name == ""
    assert serial_port.baud_rate is BaudRate.BR_9600
    assert serial_port.is_open is False


def test_invalid_baud_rate():
    with pytest.raises(ValueError):
        SerialPort("loop", 1234)


def test_open_missing_device_fails(tmp_path):
    serial_port = SerialPort(str(tmp_path / "no-such-tty"))
    with pytest.raises(SerialPortError):
        serial_port.open()


def test_prepare_before_open_fails(loop_device):
    with pytest.raises(SerialPortError):
        SerialPort("loop", device=loop_device).prepare()


def test_write_before_open_fails(loop_device):
    with pytest.raises(SerialPortError):
        SerialPort("loop", device=loop_device).write("S")


def test_prepare_configures_device(loop_device):
    serial_port = SerialPort("loop", BaudRate.BR_57600, device=loop_device)
    serial_port.open()
    try:
        serial_port.prepare()
        assert loop_device.baudrate == 57600
        assert loop_device.bytesize == serial.EIGHTBITS
        assert loop_device.parity == serial.PARITY_NONE
        assert loop_device.stopbits == serial.STOPBITS_ONE
        assert loop_device.rtscts is False
    finally:
        serial_port.close()


def test_write_and_read_single_char(port):
    assert port.write("S") == 1
    assert port.read() == b"S"


def test_read_until_includes_terminator(port):
    port.write(b"{X1Y2x3y4}{X5")
    assert port.read_until("}") == "{X1Y2x3y4}"


def test_read_string_stops_at_nul(port):
    port.write(b"abc\0def")
    assert port.read_string() == "abc\0"


def test_close_reports_state(port):
    assert port.close() is True
    assert port.is_open is False
    assert port.close() is False


def test_context_manager(loop_device):
    with SerialPort("loop", device=loop_device) as serial_port:
        assert serial_port.is_open is True
        serial_port.write("R")
        assert serial_port.read() == b"R"
    assert serial_port.is_open is False