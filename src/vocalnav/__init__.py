__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy re-exports from vocalnav.api for convenience."""
    _api_names = {
        "CommandContext",
        "Interpretation",
        "build_resolver",
        "interpret",
    }
    if name in _api_names:
        from vocalnav import api

        return getattr(api, name)
    raise AttributeError(f"module 'vocalnav' has no attribute {name!r}")
