"""Runtime configuration model for Scheduler.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    COMPLETED_FILE_ENV_VAR,
    DATA_ROOT_ENV_VAR,
    DEFAULT_COMPLETED_FILE_NAME,
    DEFAULT_DATA_ROOT,
    DEFAULT_SCHEDULES_FILE_NAME,
    SCHEDULES_FILE_ENV_VAR,
)
from core.errors import SchedulerConfigError


@dataclass(frozen=True)
class SchedulerConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Private directory holding the backing files.
        schedules_file_name: File name of the pending schedules store.
        completed_file_name: File name of the completed events store.
    """

    data_root: Path
    schedules_file_name: str = DEFAULT_SCHEDULES_FILE_NAME
    completed_file_name: str = DEFAULT_COMPLETED_FILE_NAME

    @classmethod
    def from_env(cls) -> "SchedulerConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SchedulerConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv(DATA_ROOT_ENV_VAR, str(DEFAULT_DATA_ROOT))
        schedules_file_name = validate_file_name(
            os.getenv(SCHEDULES_FILE_ENV_VAR, DEFAULT_SCHEDULES_FILE_NAME),
            SCHEDULES_FILE_ENV_VAR,
        )
        completed_file_name = validate_file_name(
            os.getenv(COMPLETED_FILE_ENV_VAR, DEFAULT_COMPLETED_FILE_NAME),
            COMPLETED_FILE_ENV_VAR,
        )
        if schedules_file_name == completed_file_name:
            raise SchedulerConfigError(
                f"{SCHEDULES_FILE_ENV_VAR} and {COMPLETED_FILE_ENV_VAR} both point to "
                f"'{schedules_file_name}'. Give the two stores different file names."
            )
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            schedules_file_name=schedules_file_name,
            completed_file_name=completed_file_name,
        )


def validate_file_name(raw_value: str, source: str) -> str:
    """Validate a backing file name.

    Args:
        raw_value: Candidate file name.
        source: Where the value came from, used in error messages.

    Returns:
        The stripped file name.

    Raises:
        SchedulerConfigError: If value is empty or contains a path component.
    """
    file_name = raw_value.strip()
    if not file_name or file_name in (".", ".."):
        raise SchedulerConfigError(
            f"Invalid {source} value: expected a file name, got '{raw_value}'."
        )
    if Path(file_name).name != file_name or "\\" in file_name:
        raise SchedulerConfigError(
            f"Invalid {source} value: '{raw_value}' contains a directory component. "
            "Use a bare file name; the directory comes from the data root."
        )
    return file_name
