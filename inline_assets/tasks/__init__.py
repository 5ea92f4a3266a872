from __future__ import annotations

from .loader import DEFAULT_TASK_FILE, load_task_file
from .model import FileMapping, TargetCfg, TaskFile, TaskOptions
from .runner import expand_mapping, run_task, run_task_file

__all__ = [
    "DEFAULT_TASK_FILE",
    "load_task_file",
    "FileMapping",
    "TargetCfg",
    "TaskFile",
    "TaskOptions",
    "expand_mapping",
    "run_task",
    "run_task_file",
]
