"""
Event notification module.

This module provides a small publish/subscribe dispatcher used to report
errors to whoever embeds the file service.
"""

from .dispatcher import EventDispatcher, dispatcher, fire, subscribe, unsubscribe

__all__ = ["EventDispatcher", "dispatcher", "fire", "subscribe", "unsubscribe"]
