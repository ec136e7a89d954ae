from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Iterable, TypeVar

from pydantic import BaseModel, Field, field_validator

from decision_tree.core.tree import DecisionTree

T = TypeVar("T")


class SampleTree(BaseModel):
    """A named builder for a ready-made decision tree."""

    name: str
    summary: str = ""
    builder: Callable[[], DecisionTree[Any]]

    model_config = {"arbitrary_types_allowed": True}

    @field_validator("name")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("name must be non-empty")
        return v

    def build(self) -> DecisionTree[Any]:
        """Build a fresh tree; every call returns an independent instance."""
        return self.builder()


class NameRegistry(BaseModel, Generic[T]):
    """Items keyed by a unique name."""

    items: Dict[str, T] = Field(default_factory=dict)

    def register(self, name: str, item: T) -> None:
        if name in self.items:
            raise ValueError(f"Duplicate registration: {name}")
        self.items[name] = item

    def get(self, name: str) -> T:
        if name not in self.items:
            available = ", ".join(sorted(self.items.keys()))
            raise KeyError(f"Unknown: {name}. Available: {available}")
        return self.items[name]

    def all(self) -> Iterable[T]:
        return self.items.values()

    def names(self) -> Iterable[str]:
        return sorted(self.items.keys())


class SampleTreeRegistry(NameRegistry[SampleTree]):
    """Sample trees registered under their own name."""

    def add(self, sample: SampleTree) -> None:
        self.register(sample.name, sample)

    def build(self, name: str) -> DecisionTree[Any]:
        return self.get(name).build()


__all__ = ["NameRegistry", "SampleTree", "SampleTreeRegistry"]
