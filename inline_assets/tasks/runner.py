"""
Исполнитель задач: раскрывает отображения source → destination,
проверяет наличие всех объявленных исходников и прогоняет каждый
файл через движок.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

import pathspec

from .loader import load_task_file
from .model import FileMapping, TaskOptions
from ..engine import inline_file
from ..errors import TaskError
from ..reporting import LogReporter
from ..types import InlineOptions

logger = logging.getLogger(__name__)

_GLOB_RE = re.compile(r"[*?\[]")


@dataclass(frozen=True)
class FilePair:
    src: Path
    dest: Path


def _is_glob(pattern: str) -> bool:
    return bool(_GLOB_RE.search(pattern))


def iter_matching_files(root: Path, patterns: Sequence[str]) -> Iterator[str]:
    """
    Relative POSIX paths of files under root matched by gitwildmatch patterns
    ("!"-prefixed patterns exclude), in sorted order.
    """
    spec = pathspec.PathSpec.from_lines("gitwildmatch", patterns)
    found: List[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # Do not enter .git
        if ".git" in dirnames:
            dirnames.remove(".git")
        for fn in filenames:
            rel = Path(dirpath, fn).relative_to(root).as_posix()
            if spec.match_file(rel):
                found.append(rel)
    yield from sorted(found)


def _is_dir_dest(dest: str, base_dir: Path) -> bool:
    return dest.endswith(("/", os.sep)) or (base_dir / dest).is_dir()


def expand_mapping(mapping: FileMapping, base_dir: Path) -> List[FilePair]:
    """
    Развернуть одно отображение в список пар файлов.

    Литеральные (не глоб) исходники, которых нет на диске, — ошибка задачи.
    """
    root = (base_dir / mapping.cwd) if mapping.cwd else base_dir
    dest = base_dir / mapping.dest

    if mapping.expand:
        if not root.is_dir():
            raise TaskError(f"source directory \"{root}\" not found.")
        pairs = []
        for rel in iter_matching_files(root, mapping.src):
            target = dest / (Path(rel).name if mapping.flatten else rel)
            pairs.append(FilePair(src=root / rel, dest=target))
        return pairs

    sources: List[Path] = []
    for entry in mapping.src:
        if _is_glob(entry):
            sources.extend(root / rel for rel in iter_matching_files(root, [entry]))
            continue
        src = root / entry
        if not src.is_file():
            raise TaskError(f"source file \"{src}\" not found.")
        sources.append(src)

    if _is_dir_dest(mapping.dest, base_dir):
        return [FilePair(src=s, dest=dest / s.name) for s in sources]
    if len(sources) > 1:
        raise TaskError(f"destination \"{dest}\" is a file but {len(sources)} sources map to it")
    return [FilePair(src=s, dest=dest) for s in sources]


def run_task(
        files: Iterable[FileMapping],
        options: InlineOptions,
        base_dir: Path,
) -> List[Path]:
    """
    Обработать набор отображений с общими опциями.

    Все отображения разворачиваются (и проверяются) до начала записи,
    поэтому отсутствующий исходник валит задачу целиком.
    """
    pairs: List[FilePair] = []
    for mapping in files:
        pairs.extend(expand_mapping(mapping, base_dir))

    written: List[Path] = []
    for pair in pairs:
        result = inline_file(pair.src, pair.dest, options)
        pair.dest.parent.mkdir(parents=True, exist_ok=True)
        pair.dest.write_bytes(result.encode("utf-8") if isinstance(result, str) else result)
        logger.info("File \"%s\" created.", pair.dest)
        written.append(pair.dest)
    return written


def run_task_file(path: Path, targets: Optional[Sequence[str]] = None) -> Dict[str, List[Path]]:
    """
    Выполнить цели файла задач (все — если targets не заданы).

    Returns:
        Имя цели → список записанных файлов
    """
    task_file = load_task_file(path)
    base_dir = path.resolve().parent

    names = list(targets) if targets else list(task_file.targets)
    unknown = [n for n in names if n not in task_file.targets]
    if unknown:
        raise TaskError(f"unknown target(s): {', '.join(unknown)}")

    results: Dict[str, List[Path]] = {}
    for name in names:
        target = task_file.targets[name]
        opts: TaskOptions = task_file.options.merged(target.options)
        logger.debug("running target '%s' with options %s", name, opts.model_dump(exclude_none=True))
        inline_opts = opts.to_inline_options(LogReporter(base=base_dir))
        results[name] = run_task(target.files, inline_opts, base_dir)
    return results


__all__ = ["FilePair", "iter_matching_files", "expand_mapping", "run_task", "run_task_file"]
