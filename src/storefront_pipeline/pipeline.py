"""Pipeline class — ordered container of PipelineStages."""

from __future__ import annotations

from dataclasses import dataclass

from storefront_pipeline.stage import PipelineStage


@dataclass(frozen=True)
class ResolvedPipeline:
    """Immutable, pre-computed execution plan."""

    stages: tuple[PipelineStage, ...]


class Pipeline:
    """Ordered container of PipelineStage instances."""

    def __init__(self, *stages: PipelineStage | Pipeline) -> None:
        self._items: list[PipelineStage | Pipeline] = list(stages)
        self._resolved: ResolvedPipeline | None = None

    def add(self, *stages: PipelineStage | Pipeline) -> Pipeline:
        self._items.extend(stages)
        self._resolved = None
        return self

    def resolve(self) -> ResolvedPipeline:
        if self._resolved is not None:
            return self._resolved

        flat: list[PipelineStage] = []
        self._flatten(self._items, flat)

        # sorted() is stable, so stages of one category keep insertion order
        sorted_stages = sorted(flat, key=lambda s: s.category.order)

        self._resolved = ResolvedPipeline(stages=tuple(sorted_stages))
        return self._resolved

    @staticmethod
    def _flatten(
        items: list[PipelineStage | Pipeline],
        out: list[PipelineStage],
    ) -> None:
        for item in items:
            if isinstance(item, Pipeline):
                Pipeline._flatten(item._items, out)
            elif isinstance(item, PipelineStage):
                out.append(item)
