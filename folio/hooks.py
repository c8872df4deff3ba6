"""Site event hooks.

Handlers are plain callables taking keyword arguments. Events emitted by
the site:

- ``locale.changed`` (``previous``, ``locale``)
- ``locale.preference_ignored`` (``value``): a stored locale preference
  that is not a supported locale was skipped during resolution.
"""

from collections.abc import Callable

LOCALE_CHANGED = "locale.changed"
LOCALE_PREFERENCE_IGNORED = "locale.preference_ignored"

_handlers: dict[str, list[Callable]] = {}


def on(event: str, handler: Callable) -> None:
    """Register a handler for an event."""
    _handlers.setdefault(event, []).append(handler)


def off(event: str, handler: Callable) -> None:
    """Remove a handler for an event."""
    handlers = _handlers.get(event, [])
    if handler in handlers:
        handlers.remove(handler)


def emit(event: str, **kwargs) -> None:
    """Emit an event, calling all registered handlers in registration order.

    Handlers may unregister themselves while the event is being emitted.
    """
    for handler in list(_handlers.get(event, [])):
        handler(**kwargs)


def clear() -> None:
    """Remove all handlers. Useful for testing."""
    _handlers.clear()
