"""Highway traffic simulation with sensor-driven vehicles run as periodic tasks."""

__version__ = "0.1.0"