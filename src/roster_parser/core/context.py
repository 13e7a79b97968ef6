from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ImportContext:
    """
    Request-scoped state for one import run.
    Passed between the CLI and the pipeline instead of module globals.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None
    store_path: Optional[str] = None
    cache_path: Optional[str] = None
    output_path: Optional[str] = None

    stats: Dict[str, Any] = field(default_factory=dict)
    errors: list = field(default_factory=list)

    debug: bool = False
