from dataclasses import dataclass

from .exceptions import ConfigurationError

# Score at or above which a single best fuzzy match is auto-resolved
RESOLVE_THRESHOLD = 0.80

# Score at or above which an entry is offered as an ambiguous candidate
AMBIGUOUS_THRESHOLD = 0.40

# Minimum gap between the two best scores needed to auto-resolve
TIE_GAP = 0.05

# Maximum candidates returned in an ambiguous outcome
MAX_AMBIGUOUS_CANDIDATES = 3

# Fuzzy winners at or above this score are reported as exact matches
EXACT_SOURCE_THRESHOLD = 0.95

# Fixed confidences of the deterministic pre-checks
EXACT_NAME_CONFIDENCE = 1.0
SLUG_CONFIDENCE = 0.95
ALIAS_CONFIDENCE = 0.93


@dataclass(frozen=True)
class ResolverConfig:
    # Fuzzy thresholds
    resolve_threshold: float = RESOLVE_THRESHOLD
    ambiguous_threshold: float = AMBIGUOUS_THRESHOLD
    tie_gap: float = TIE_GAP
    exact_source_threshold: float = EXACT_SOURCE_THRESHOLD

    # Output shaping
    max_ambiguous_candidates: int = MAX_AMBIGUOUS_CANDIDATES

    def __post_init__(self):
        for name in ("resolve_threshold", "ambiguous_threshold", "exact_source_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be between 0.0 and 1.0, got {value}")

        if self.ambiguous_threshold > self.resolve_threshold:
            raise ConfigurationError(
                f"ambiguous_threshold ({self.ambiguous_threshold}) cannot exceed "
                f"resolve_threshold ({self.resolve_threshold})"
            )

        if self.tie_gap < 0.0:
            raise ConfigurationError(f"tie_gap cannot be negative, got {self.tie_gap}")

        if self.max_ambiguous_candidates < 1:
            raise ConfigurationError(
                f"max_ambiguous_candidates must be at least 1, got {self.max_ambiguous_candidates}"
            )
