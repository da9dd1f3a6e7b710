"""Core constants used across Scheduler modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".scheduler")
DEFAULT_SCHEDULES_FILE_NAME = "schedules.plist"
DEFAULT_COMPLETED_FILE_NAME = "completedEvents.plist"
DATA_ROOT_ENV_VAR = "SCHEDULER_DATA_ROOT"
SCHEDULES_FILE_ENV_VAR = "SCHEDULER_SCHEDULES_FILE"
COMPLETED_FILE_ENV_VAR = "SCHEDULER_COMPLETED_FILE"
TEMP_FILE_SUFFIX = ".tmp"
EVENT_NAME_KEY = "name"
EVENT_DATE_KEY = "date"
