# src/file_seeker/models.py
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import JobsFileError


class SeekJob(BaseModel):
    """One directory to scan and the extension to look for."""
    directory: Path         # expanded with ~; validated as a directory only when the job runs
    extension: str          # without the leading dot, e.g. "pdf"

    model_config = ConfigDict(extra='forbid')

    @field_validator('directory')
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return value.expanduser()


class JobsFile(BaseModel):
    """Structure of the YAML file read by `fseek batch`."""
    jobs: List[SeekJob]

    model_config = ConfigDict(extra='forbid')


def load_jobs_file(jobs_path: Path) -> JobsFile:
    """Reads and validates a batch jobs file, raising JobsFileError for any problem."""
    if not jobs_path.is_file():
        raise JobsFileError(f"Jobs file not found: {jobs_path}")

    try:
        with open(jobs_path, 'rt', encoding='utf-8') as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise JobsFileError(f"Could not parse {jobs_path}: {e}") from e
    except OSError as e:
        raise JobsFileError(f"Could not read {jobs_path}: {e}") from e

    if raw is None:
        raise JobsFileError(f"Jobs file is empty: {jobs_path}")

    try:
        return JobsFile.model_validate(raw)
    except ValidationError as e:
        raise JobsFileError(f"Invalid jobs file {jobs_path}:\n{e}") from e
