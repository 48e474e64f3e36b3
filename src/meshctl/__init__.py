"""meshctl: client-side resource store for a service-mesh control plane."""

__version__ = "0.1.0"
