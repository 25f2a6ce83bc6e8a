"""Admin account provisioning and login client for the Warm villa site."""

__version__ = "1.0.0"
