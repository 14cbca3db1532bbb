"""
Resolution policy: runs the pipeline stages in priority order.

Order: online > trusted id > candidate selection > exact name > slug >
alias > fuzzy. The first stage that returns an outcome wins.
"""
import logging
from typing import List, Optional

from .exact_matcher import AliasMatcher, ExactNameMatcher, SlugMatcher
from .fuzzy_matcher import FuzzyVenueMatcher
from .outcomes import Unresolved, VenueResolutionOutcome
from .resolution_stage import ResolutionContext, ResolutionStage
from .short_circuits import CandidateCheck, OnlineShortCircuit, TrustedIdCheck

logger = logging.getLogger(__name__)


class ResolutionPolicy:
    """
    Ordered, short-circuiting list of resolution stages.
    
    Stages are tried in order until one returns an outcome. If every stage
    defers, the result is unresolved for the current candidate name.
    """
    
    def __init__(self, stages: List[ResolutionStage]):
        """
        :param stages: Stages to try in order
        """
        if not stages:
            raise ValueError("At least one stage must be provided")
        
        self._stages = list(stages)
    
    @property
    def stage_names(self) -> List[str]:
        return [stage.name for stage in self._stages]
    
    def resolve(self, context: ResolutionContext) -> VenueResolutionOutcome:
        """
        Run the stages against one context.
        
        :param context: Per-call resolution context
        :return: Outcome of the first deciding stage
        """
        for stage in self._stages:
            outcome = stage.evaluate(context)
            if outcome is not None:
                logger.debug(f"Stage '{stage.name}' decided: {outcome.status}")
                return outcome
        
        return Unresolved(input_name=context.candidate_name)


def default_stages(fuzzy_matcher: Optional[FuzzyVenueMatcher] = None) -> List[ResolutionStage]:
    """The standard stage order, optionally with a custom fuzzy stage."""
    return [
        OnlineShortCircuit(),
        TrustedIdCheck(),
        CandidateCheck(),
        ExactNameMatcher(),
        SlugMatcher(),
        AliasMatcher(),
        fuzzy_matcher or FuzzyVenueMatcher(),
    ]
