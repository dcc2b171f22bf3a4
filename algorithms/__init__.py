"""
algorithms/__init__.py — Algorithm Registry
============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import get_algorithm, load_driver

The catalog is split by topic (algorithms/catalog/<topic>.py).  A topic
module is imported the first time something asks for it and cached;
each AlgoMeta card in turn imports its driver only when `load()` is
called.  Listing the catalog therefore never imports a single driver.

Adding an algorithm is: write the generator, add one AlgoMeta card to
the topic's catalog module.
"""

import importlib
from typing import Dict, List, Optional

from algorithms.frame import Frame, Highlights, HighlightKind, FrameBuilder, NO_LINE
from algorithms.inputs import InvalidInputError, SearchInput
from algorithms.meta import AlgoMeta, Complexity, Driver
from shared.logger import get_logger

logger = get_logger(__name__)


TOPICS = ("sorting", "searching", "arrays")

_catalog_cache: Dict[str, List[AlgoMeta]] = {}


class UnknownAlgorithmError(KeyError):
    """Raised when a slug is not in any catalog."""


# ---------------------------------------------------------------------------
# Topic loading
# ---------------------------------------------------------------------------
def load_topic(topic: str) -> List[AlgoMeta]:
    """Return the catalog for one topic, importing it on first use."""
    if topic in _catalog_cache:
        return _catalog_cache[topic]
    if topic not in TOPICS:
        return []

    try:
        module = importlib.import_module(f"algorithms.catalog.{topic}")
    except ImportError:
        logger.exception("Failed to load %s algorithms", topic)
        return []

    algos = list(module.ALGORITHMS)
    _catalog_cache[topic] = algos
    logger.debug("Loaded %d %s algorithms", len(algos), topic)
    return algos


def load_all_topics() -> Dict[str, List[AlgoMeta]]:
    return {topic: load_topic(topic) for topic in TOPICS}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def find_algo(topic: str, slug: str) -> Optional[AlgoMeta]:
    """Return the card for `slug` within `topic`, or None."""
    for algo in load_topic(topic):
        if algo.slug == slug:
            return algo
    return None


def get_algorithm(slug: str) -> Optional[AlgoMeta]:
    """Return the card for `slug` from any topic, or None."""
    for topic in TOPICS:
        algo = find_algo(topic, slug)
        if algo is not None:
            return algo
    return None


lookup = get_algorithm


def list_algorithms(topic: Optional[str] = None) -> List[AlgoMeta]:
    """All registered algorithms in catalog order, optionally for one topic."""
    if topic is not None:
        return list(load_topic(topic))
    return [algo for t in TOPICS for algo in load_topic(t)]


def algorithms_by_topic() -> Dict[str, List[AlgoMeta]]:
    return load_all_topics()


def load_driver(slug: str) -> Driver:
    """Resolve slug → driver function, importing the driver if needed."""
    algo = get_algorithm(slug)
    if algo is None:
        raise UnknownAlgorithmError(slug)
    return algo.load()


__all__ = [
    "AlgoMeta",
    "Complexity",
    "Driver",
    "Frame",
    "FrameBuilder",
    "Highlights",
    "HighlightKind",
    "NO_LINE",
    "InvalidInputError",
    "SearchInput",
    "UnknownAlgorithmError",
    "TOPICS",
    "load_topic",
    "load_all_topics",
    "find_algo",
    "get_algorithm",
    "lookup",
    "list_algorithms",
    "algorithms_by_topic",
    "load_driver",
]
