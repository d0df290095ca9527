"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from dashsearch.infrastructure.
"""

from dashsearch.application.interfaces.repositories import (
    IDashboardSearchRepository,
    IStarRepository,
)

__all__ = ["IDashboardSearchRepository", "IStarRepository"]
