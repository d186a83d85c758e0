"""Platform-neutral Bluetooth Low Energy API types and event plumbing."""

__version__ = "0.1.0"

__all__ = ["adapter_manager", "api", "bdaddr", "bleuuid", "broadcast"]