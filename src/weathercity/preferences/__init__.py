"""Durable key-value preferences.

A small shared-preferences style storage contract: string values keyed
within a named namespace, read with a default, and written through a
batched editor.
"""

from weathercity.preferences.base import PreferencesEditor, SharedPreferences
from weathercity.preferences.file import JsonFilePreferences
from weathercity.preferences.memory import InMemoryPreferences
from weathercity.preferences.models import PreferencesDocument

__all__ = [
    "InMemoryPreferences",
    "JsonFilePreferences",
    "PreferencesDocument",
    "PreferencesEditor",
    "SharedPreferences",
]
