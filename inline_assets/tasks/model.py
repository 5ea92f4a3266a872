"""
Модель YAML-файла задач (аналог multi-task конфигурации сборщика).

  options:            # общие опции всех целей
    verbose: true
  targets:
    sample:
      options: {cssmin: true}
      files:
        - {expand: true, cwd: src, src: "**/*.html", dest: dst}
        - {src: [index.html], dest: out/}
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..types import InlineOptions, Reporter


class TaskOptions(BaseModel):
    """Опции в файле задач; None — «не задано», берётся уровень выше."""
    model_config = ConfigDict(extra="forbid")

    htmlmin: Optional[bool] = None
    cssmin: Optional[bool] = None
    jsmin: Optional[bool] = None
    pattern: Optional[List[str]] = None
    purge: Optional[bool] = None
    verbose: Optional[bool] = None

    @field_validator("pattern", mode="before")
    @classmethod
    def _split_pattern(cls, v):
        if isinstance(v, str):
            return v.split(",")
        return v

    def merged(self, override: TaskOptions) -> TaskOptions:
        """Значения override, заданные явно, перекрывают текущие."""
        data = self.model_dump(exclude_none=True)
        data.update(override.model_dump(exclude_none=True))
        return TaskOptions.model_validate(data)

    def to_inline_options(self, reporter: Optional[Reporter] = None) -> InlineOptions:
        raw = self.model_dump(exclude_none=True, exclude={"verbose"})
        if self.verbose and reporter is not None:
            raw["verbose"] = reporter
        return InlineOptions.from_dict(raw)


class FileMapping(BaseModel):
    """Одно отображение source → destination."""
    model_config = ConfigDict(extra="forbid")

    src: List[str]
    dest: str
    # expand: src — глоб-паттерны относительно cwd, dest — каталог
    expand: bool = False
    cwd: Optional[str] = None
    flatten: bool = False

    @field_validator("src", mode="before")
    @classmethod
    def _src_as_list(cls, v):
        if isinstance(v, str):
            return [v]
        return v


class TargetCfg(BaseModel):
    model_config = ConfigDict(extra="forbid")

    options: TaskOptions = Field(default_factory=TaskOptions)
    files: List[FileMapping] = Field(default_factory=list)


class TaskFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    options: TaskOptions = Field(default_factory=TaskOptions)
    targets: Dict[str, TargetCfg] = Field(default_factory=dict)


__all__ = ["TaskOptions", "FileMapping", "TargetCfg", "TaskFile"]
