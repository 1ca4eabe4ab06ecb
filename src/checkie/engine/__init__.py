"""Move-selection package: greedy selector and Qt worker bridge."""

from checkie.engine.greedy import GreedySearchEngine
from checkie.engine.qt_bridge import EngineWorker
from checkie.engine.search import IEngine, RandomSource, SearchResult

DefaultEngine: type[IEngine] = GreedySearchEngine

__all__ = [
    "DefaultEngine",
    "EngineWorker",
    "GreedySearchEngine",
    "IEngine",
    "RandomSource",
    "SearchResult",
]
