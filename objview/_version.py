"""Version number."""

try:
    from importlib.metadata import version
    __version__ = version(__package__)
except Exception:
    # Running from a source checkout without installed metadata
    __version__ = "0.3.0"
