"""Human-readable device listing."""

from ..protocol.schema import DeviceInfo


def _display(text: str) -> str:
    # Padded fields keep their NULs in DeviceInfo; terminals don't need them
    return text.rstrip("\x00")


def format_device(device: DeviceInfo) -> str:
    """Render one device as a titled block."""
    name = device.network_name
    lines = [
        name,
        "=" * len(name),
        f"IP Address: {device.ip_address}",
        f"Subnet Mask: {_display(device.subnet_mask)}",
        f"Product ID: {_display(device.product_id)}",
        f"Firmware Version: {_display(device.firmware_version)}",
        f"Operation Mode: {device.operation_mode}",
        f"MAC address: {device.mac}",
        f"Regulation: {device.region}",
    ]
    return "\n".join(lines)


def format_devices(devices: list[DeviceInfo]) -> str:
    """Render devices in arrival order, separated by blank lines."""
    return "\n\n".join(format_device(d) for d in devices)
