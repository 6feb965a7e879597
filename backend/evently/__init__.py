"""Evently: data-access layer for the event booking application."""

__version__ = "0.1.0"
__author__ = "Evently Team"

from evently.models import BookingRecord, EventRecord

__all__ = ["__version__", "__author__", "EventRecord", "BookingRecord"]
