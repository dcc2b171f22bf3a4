"""
meta.py — Algorithm Metadata Card
==================================
AlgoMeta is the static, authored-once description of one algorithm:
what to show in the side panels (title, summary, pseudocode, complexity,
example code) plus a lazy reference to the driver.

The driver module is NOT imported when the catalog is loaded.  It is
resolved the first time someone calls `load()` (or `run()`), then cached
on the card.
"""

import importlib
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from algorithms.frame import Frame
from shared.logger import get_logger

logger = get_logger(__name__)

Driver = Callable[..., Iterator[Frame]]

LANGUAGES = ("python", "javascript", "java", "cpp")


@dataclass(frozen=True)
class Complexity:
    best:     str
    average:  str
    worst:    str
    space:    str
    stable:   Optional[bool] = None
    in_place: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time":    {"best": self.best, "average": self.average, "worst": self.worst},
            "space":   self.space,
            "stable":  self.stable,
            "inPlace": self.in_place,
        }


@dataclass(frozen=True)
class AlgoMeta:
    slug:          str                          # registry key, e.g. "bubble-sort"
    title:         str                          # human label, e.g. "Bubble Sort"
    topic:         str                          # "sorting" | "searching" | "arrays"
    summary:       str                          # one-liner for the catalog card
    pseudocode:    Tuple[str, ...]              # pc_line N highlights pseudocode[N-1]
    complexity:    Complexity
    module:        str                          # dotted path of the driver module
    entry:         str                          # driver function name in that module
    input_kind:    str                          = "array"   # "array" | "search"
    about:         str                          = ""
    pros:          Tuple[str, ...]              = ()
    cons:          Tuple[str, ...]              = ()
    code:          Dict[str, str]               = field(default_factory=dict)
    code_line_map: Dict[str, Tuple[int, ...]]   = field(default_factory=dict)
    _driver:       Dict[str, Driver]            = field(
        default_factory=dict, repr=False, compare=False,
    )

    # ------------------------------------------------------------------
    # Lazy driver resolution
    # ------------------------------------------------------------------
    def load(self) -> Driver:
        """Import the driver module on first use and return the driver."""
        driver = self._driver.get("fn")
        if driver is None:
            logger.debug("Loading driver %s.%s for %s", self.module, self.entry, self.slug)
            module = importlib.import_module(self.module)
            driver = getattr(module, self.entry)
            self._driver["fn"] = driver
        return driver

    @property
    def is_loaded(self) -> bool:
        return "fn" in self._driver

    def run(self, data: Any, seed: Optional[int] = None) -> Iterator[Frame]:
        return self.load()(data, seed=seed)

    # ------------------------------------------------------------------
    # Display helpers
    # ------------------------------------------------------------------
    def code_line_for(self, language: str, pc_line: int) -> Optional[int]:
        """Map a 1-based pseudocode line to the matching line of `code[language]`."""
        lines = self.code_line_map.get(language)
        if not lines or not 1 <= pc_line <= len(lines):
            return None
        return lines[pc_line - 1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug":        self.slug,
            "title":       self.title,
            "topic":       self.topic,
            "summary":     self.summary,
            "pseudocode":  list(self.pseudocode),
            "complexity":  self.complexity.to_dict(),
            "inputKind":   self.input_kind,
            "about":       self.about,
            "pros":        list(self.pros),
            "cons":        list(self.cons),
            "code":        dict(self.code),
            "codeLineMap": {lang: list(lines) for lang, lines in self.code_line_map.items()},
        }
