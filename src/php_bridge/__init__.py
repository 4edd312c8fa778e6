"""PHP Bridge: PHP timezone offsets and PHP array config parsing."""

try:
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("php-bridge")
except Exception:
    __version__ = "dev"
