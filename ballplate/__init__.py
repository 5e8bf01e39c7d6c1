"""Serial link, telemetry parsing and worker loops for a ball-and-plate balancing rig."""

__version__ = "0.1.0"

__all__ = ["arduino", "communication", "graphic", "protocol", "serialport"]