"""Pydantic v2 models for a reactforge run.

Defines the user's answers (``ProjectOptions``) and the typed outcome of each
pipeline stage (``StageResult``) and of the whole run (``PipelineResult``).
None of these are persisted; they live for the duration of one process.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from reactforge.config import DEFAULT_PROJECT_NAME


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Feature(str, Enum):
    """Optional features offered by the multi-select prompt."""
    ROUTER = "router"
    QUERY = "query"
    TAILWIND = "tailwind"

    @property
    def display_name(self) -> str:
        return FEATURE_TITLES[self]


FEATURE_TITLES: dict[Feature, str] = {
    Feature.ROUTER: "Tanstack Router",
    Feature.QUERY: "Tanstack Query",
    Feature.TAILWIND: "Tailwind CSS",
}


class Stage(int, Enum):
    """The five forward-only stages of a run, in execution order."""
    PROMPT = 1
    SCAFFOLD = 2
    CONFIGURE = 3
    INSTALL = 4
    TAILWIND = 5

    @property
    def label(self) -> str:
        return self.name


class StageStatus(str, Enum):
    """Outcome of a single stage."""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


# ---------------------------------------------------------------------------
# Feature list parsing
# ---------------------------------------------------------------------------

def parse_feature_list(value: str) -> list[Feature]:
    """Parse a comma-separated feature list such as ``"router,tailwind"``.

    An empty string means no features.  Duplicates collapse and the result
    keeps the fixed router, query, tailwind order.

    Raises:
        ValueError: If a name is not a known feature.
    """
    requested: set[Feature] = set()
    for raw in value.split(","):
        name = raw.strip().lower()
        if not name:
            continue
        try:
            requested.add(Feature(name))
        except ValueError:
            known = ", ".join(f.value for f in Feature)
            raise ValueError(f"Unknown feature '{name}' (expected one of: {known})") from None
    return [f for f in Feature if f in requested]


# ---------------------------------------------------------------------------
# User answers
# ---------------------------------------------------------------------------

class ProjectOptions(BaseModel):
    """Normalised answers collected from the user."""
    project_name: str = Field(default=DEFAULT_PROJECT_NAME, min_length=1)
    router: bool = Field(default=False)
    query: bool = Field(default=False)
    tailwind: bool = Field(default=False)

    @field_validator("project_name", mode="before")
    @classmethod
    def _default_blank_name(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or DEFAULT_PROJECT_NAME
        return value

    @classmethod
    def from_answers(
        cls,
        project_name: str,
        features: Iterable[str | Feature],
        default_name: str = DEFAULT_PROJECT_NAME,
    ) -> "ProjectOptions":
        """Map raw prompt answers to options by feature membership."""
        selected = {Feature(f) for f in features}
        return cls(
            project_name=project_name.strip() or default_name,
            router=Feature.ROUTER in selected,
            query=Feature.QUERY in selected,
            tailwind=Feature.TAILWIND in selected,
        )

    @property
    def features(self) -> list[Feature]:
        """Enabled features in fixed order."""
        flags = {
            Feature.ROUTER: self.router,
            Feature.QUERY: self.query,
            Feature.TAILWIND: self.tailwind,
        }
        return [feature for feature, enabled in flags.items() if enabled]


# ---------------------------------------------------------------------------
# Stage outcomes
# ---------------------------------------------------------------------------

class StageResult(BaseModel):
    """Outcome of one stage; failures carry the underlying diagnostic."""
    stage: Stage
    status: StageStatus
    message: str = Field(default="")
    error: Optional[str] = Field(default=None)
    duration: float = Field(default=0.0, ge=0)

    @property
    def ok(self) -> bool:
        return self.status != StageStatus.FAILED

    @classmethod
    def success(cls, stage: Stage, message: str = "", duration: float = 0.0) -> "StageResult":
        return cls(stage=stage, status=StageStatus.SUCCESS, message=message, duration=duration)

    @classmethod
    def skipped(cls, stage: Stage, message: str = "") -> "StageResult":
        return cls(stage=stage, status=StageStatus.SKIPPED, message=message)

    @classmethod
    def failed(cls, stage: Stage, error: str, duration: float = 0.0) -> "StageResult":
        return cls(stage=stage, status=StageStatus.FAILED, error=error, duration=duration)


class PipelineResult(BaseModel):
    """Outcome of a whole run.

    ``stages`` holds results in execution order; a run that aborted ends with
    the failed stage and contains nothing for the stages after it.
    """
    options: ProjectOptions
    project_dir: Path
    stages: list[StageResult] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(result.ok for result in self.stages)

    @property
    def failed_stage(self) -> Optional[StageResult]:
        for result in self.stages:
            if not result.ok:
                return result
        return None
