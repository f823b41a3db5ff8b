"""Render Result Dataclass

Result outputs from the SVG render pipeline.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import InputWarning
from .page_builder.page_buffer import Page


@dataclass
class RenderResult:
    """Result from the SVG render pipeline.

    Attributes:
        status: Processing status ("completed", "failed")
        status_message: Human-readable status message
        pages: Committed pages in order (empty when the run failed)
        warnings: Elements that were skipped, with the reason
        error: Error message if processing failed (None otherwise)
    """

    status: str  # "completed", "failed"
    status_message: str

    pages: List[Page] = field(default_factory=list)
    warnings: List[InputWarning] = field(default_factory=list)

    error: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """True if layout completed successfully."""
        return self.status == "completed"

    @property
    def is_failed(self) -> bool:
        """True if layout failed with an error."""
        return self.status == "failed"

    @property
    def svgs(self) -> List[str]:
        """SVG markup of every page, in order."""
        return [page.svg for page in self.pages]
