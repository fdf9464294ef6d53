from __future__ import annotations

"""
Handler Tagging Utilities.

Marks handlers created by configure_diagnostics so they can be told
apart from handlers the host application attached itself.
"""

import logging

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_prefixlog_handler"


def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as internally managed.

    Args:
        handler: The logging handler instance to tag.
    """
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was created by this package.

    Args:
        handler: The handler to inspect.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))
