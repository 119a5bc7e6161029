"""Sparse per-model value container."""

from typing import Generic, TypeVar

V = TypeVar("V")


class ModelValues(dict[str, V], Generic[V]):
    """Maps a weather model id to that model's value for one variable.

    A missing key means the model does not publish the variable (or published
    null for this slot). It is never a stand-in for zero.
    """

    def get_for_model(self, model: str) -> V | None:
        return self.get(model)

    def has_model(self, model: str) -> bool:
        return model in self

    def models(self) -> list[str]:
        return list(self.keys())
