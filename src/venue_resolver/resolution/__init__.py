"""
Deterministic venue resolution layer.

Matches a proposed or mentioned venue name against a caller-supplied venue
catalog and returns exactly one of five outcomes.

Key components:
- Normalizer: match normalization, slugs, tokens
- AliasIndexBuilder: acronyms and curated nicknames per venue
- Extractor: picks the candidate name out of a message
- Matchers: exact name, slug, alias, then fuzzy scoring
- ResolutionPolicy: ordered, short-circuiting stage pipeline
- Gate: whether resolution should run for a request at all
"""
from .normalizer import match_slug, normalize_for_match, ordered_tokens, token_jaccard_score, tokenize
from .alias_index import (
    ALIAS_OVERRIDES,
    STOPWORDS,
    AliasIndex,
    AliasIndexBuilder,
    acronym_for,
    build_alias_index,
)
from .entity_extractor import (
    extract_alias_from_message,
    extract_name_from_message,
    select_candidate_name,
)
from .match_scorer import score_venue_match
from .outcomes import (
    Ambiguous,
    CustomLocation,
    OnlineExplicit,
    Resolved,
    ResolutionSource,
    Unresolved,
    VenueResolutionOutcome,
    fold_outcome,
)
from .resolution_stage import ResolutionContext, ResolutionStage
from .short_circuits import CandidateCheck, OnlineShortCircuit, TrustedIdCheck
from .exact_matcher import AliasMatcher, DeterministicMatcher, ExactNameMatcher, SlugMatcher
from .fuzzy_matcher import FuzzyVenueMatcher
from .resolution_policy import ResolutionPolicy, default_stages
from .resolution_metadata import ResolutionMetadata
from .venue_resolver import VenueResolver, resolve_venue
from .resolution_gate import InterpretMode, has_venue_signals_in_draft, should_resolve_venue

__all__ = [
    "normalize_for_match",
    "match_slug",
    "tokenize",
    "ordered_tokens",
    "token_jaccard_score",
    "ALIAS_OVERRIDES",
    "STOPWORDS",
    "AliasIndex",
    "AliasIndexBuilder",
    "acronym_for",
    "build_alias_index",
    "extract_name_from_message",
    "extract_alias_from_message",
    "select_candidate_name",
    "score_venue_match",
    "Resolved",
    "Ambiguous",
    "Unresolved",
    "OnlineExplicit",
    "CustomLocation",
    "ResolutionSource",
    "VenueResolutionOutcome",
    "fold_outcome",
    "ResolutionContext",
    "ResolutionStage",
    "OnlineShortCircuit",
    "TrustedIdCheck",
    "CandidateCheck",
    "DeterministicMatcher",
    "ExactNameMatcher",
    "SlugMatcher",
    "AliasMatcher",
    "FuzzyVenueMatcher",
    "ResolutionPolicy",
    "default_stages",
    "ResolutionMetadata",
    "VenueResolver",
    "resolve_venue",
    "InterpretMode",
    "has_venue_signals_in_draft",
    "should_resolve_venue",
]
