"""Configuration schema definitions using Pydantic for validation.

Graphs are configured through a small immutable model so that a
subgraph can share its parent's configuration safely.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class GraphConfig(BaseModel):
    """Configuration for a Graph instance.

    Attributes:
        graph_id: Label used in logs, repr() and summary().
        repr_max_items: Maximum nodes or edges listed by str() before
            the listing is truncated.
    """

    graph_id: str = Field(default="default", min_length=1)
    repr_max_items: int = Field(default=50, ge=1, le=10000)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GraphConfig":
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary.

        Returns:
            GraphConfig instance.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()
