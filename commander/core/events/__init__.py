"""
Event System - Synchronous observer signals.

Usage:
    from commander.core.events import Signal

    changed = Signal("HistoryChanged")
    changed.connect(on_changed)
    changed.emit(True)
"""
from .observer import Signal


__all__ = ["Signal"]
