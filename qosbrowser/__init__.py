"""Back-end core of an object-storage browser: request gateway, cloud manager, saved logins and content-auditing models."""

__version__ = "0.1.0"