"""Reporting module - text and JSON output of discovered devices."""

from .json_reporter import JsonReporter
from .text_reporter import format_device, format_devices

__all__ = ["JsonReporter", "format_device", "format_devices"]
