from __future__ import annotations

"""Storage strategies a grid can use and the verdicts that switch between them."""

from enum import Enum


class Representation(Enum):
    """Active backing of an adaptive grid."""

    DENSE = "dense"
    SPARSE = "sparse"

    @classmethod
    def parse(cls, value: "Representation | str") -> "Representation":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown representation: {value!r}") from None


class Verdict(Enum):
    """Outcome of consulting a sampler after a mutation."""

    KEEP = "keep"
    CONVERT_TO_DENSE = "convert_to_dense"
    CONVERT_TO_SPARSE = "convert_to_sparse"

    def target(self) -> Representation | None:
        if self is Verdict.CONVERT_TO_DENSE:
            return Representation.DENSE
        if self is Verdict.CONVERT_TO_SPARSE:
            return Representation.SPARSE
        return None


def verdict_for(current: Representation, preferred: Representation) -> Verdict:
    """Return the verdict that moves ``current`` to ``preferred``."""
    if current is preferred:
        return Verdict.KEEP
    if preferred is Representation.DENSE:
        return Verdict.CONVERT_TO_DENSE
    return Verdict.CONVERT_TO_SPARSE


__all__ = ["Representation", "Verdict", "verdict_for"]
