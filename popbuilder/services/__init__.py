"""
Services package initialization.
"""
from popbuilder.services.summary_service import PopulationSummaryService
from popbuilder.services.detail_service import PopulationDetailService
from popbuilder.services.visit_gate import decide_visit, VisitDecision

__all__ = [
    "PopulationSummaryService",
    "PopulationDetailService",
    "decide_visit",
    "VisitDecision",
]
