"""Upstream endpoint clients."""

from src.infrastructure.upstream.apps_script import AppsScriptForwarder

_forwarder: AppsScriptForwarder | None = None


def get_forwarder() -> AppsScriptForwarder:
    """Get singleton submission forwarder instance."""
    global _forwarder
    if _forwarder is None:
        _forwarder = AppsScriptForwarder.from_settings()
    return _forwarder


def reset_forwarder() -> None:
    """Reset singleton (for testing)."""
    global _forwarder
    _forwarder = None


__all__ = ["AppsScriptForwarder", "get_forwarder", "reset_forwarder"]
