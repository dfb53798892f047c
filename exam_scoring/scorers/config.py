"""
Scoring Configuration - thresholds and per-component maxima

Every knob has a documented default; DEFAULT_CONFIG reproduces the
practice-platform behaviour. Configs can be built from a dict or a JSON file.
"""

import json
import logging
from dataclasses import dataclass, field, fields, replace
from typing import Dict, Tuple

logger = logging.getLogger(__name__)


# camelCase option names accepted for feedback thresholds
_FEEDBACK_ALIASES = {
    'excellentRatio': 'excellent_ratio',
    'goodRatio': 'good_ratio',
    'fluencyFloor': 'fluency_floor',
    'pronunciationFloor': 'pronunciation_floor',
    'completenessRatio': 'completeness_ratio',
}


@dataclass(frozen=True)
class FeedbackThresholds:
    """Cut-offs used by the feedback generator"""
    excellent_ratio: float = 0.833    # score/max above this -> praise
    good_ratio: float = 0.5           # score/max above this -> encouragement
    fluency_floor: float = 3.0        # fluency below this -> pacing advice
    pronunciation_floor: float = 3.0  # pronunciation below this -> clarity advice
    completeness_ratio: float = 0.5   # transcript shorter than this share of reference -> warning

    @classmethod
    def from_dict(cls, data: Dict) -> 'FeedbackThresholds':
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            name = _FEEDBACK_ALIASES.get(key, key)
            if name not in known:
                options = ', '.join(sorted(_FEEDBACK_ALIASES))
                raise ValueError(f"Unknown feedback option: '{key}'. Recognised: {options}")
            values[name] = float(value)
        return cls(**values)


@dataclass(frozen=True)
class ScoringConfig:
    """All tunable numbers used by the scorers"""

    # Word alignment (read aloud / repeat sentence)
    good_threshold: float = 0.8
    average_threshold: float = 0.5
    fluency_ratio_cap: float = 1.5
    content_max: float = 5.0
    pronunciation_max: float = 5.0
    fluency_max: float = 5.0
    read_aloud_max: float = 15.0

    # Summaries: (short_min, target_min, target_max, long_max)
    summary_bands: Tuple[int, int, int, int] = (40, 50, 70, 100)
    form_max: float = 2.0
    summary_content_max: float = 2.0
    grammar_max: float = 2.0
    vocabulary_max: float = 2.0
    spelling_max: float = 2.0
    language_proxy_credit: float = 1.5

    # Essays: (short_min, target_min, target_max, long_max)
    essay_bands: Tuple[int, int, int, int] = (120, 200, 300, 380)
    essay_content_max: float = 3.0
    essay_short_words: int = 100
    essay_structure_min_lines: int = 3
    essay_component_max: float = 2.0

    feedback: FeedbackThresholds = field(default_factory=FeedbackThresholds)

    @property
    def summary_max(self) -> float:
        return (self.form_max + self.summary_content_max + self.grammar_max
                + self.vocabulary_max + self.spelling_max)

    @property
    def essay_max(self) -> float:
        # form, grammar, vocabulary, spelling, structure, general + content
        return self.essay_component_max * 6 + self.essay_content_max

    def validate(self) -> 'ScoringConfig':
        """Raise ValueError for inconsistent settings, else return self"""

        for name in ('good_threshold', 'average_threshold'):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if self.average_threshold > self.good_threshold:
            raise ValueError("average_threshold cannot exceed good_threshold")
        if self.fluency_ratio_cap < 1.0:
            raise ValueError("fluency_ratio_cap must be at least 1.0")

        for name in ('summary_bands', 'essay_bands'):
            bands = getattr(self, name)
            if len(bands) != 4 or list(bands) != sorted(bands):
                raise ValueError(f"{name} must be four ascending word counts, got {bands}")

        for f in fields(self):
            value = getattr(self, f.name)
            if f.name.endswith('_max') and value < 0:
                raise ValueError(f"{f.name} cannot be negative")

        if self.language_proxy_credit > min(self.grammar_max, self.vocabulary_max, self.spelling_max):
            raise ValueError("language_proxy_credit cannot exceed the grammar/vocabulary/spelling maxima")

        return self

    @classmethod
    def from_dict(cls, data: Dict) -> 'ScoringConfig':
        """Build a config from a mapping; unknown keys are rejected"""

        known = {f.name: f for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key not in known:
                options = ', '.join(sorted(known))
                raise ValueError(f"Unknown config option: '{key}'. Recognised: {options}")
            if key == 'feedback':
                value = value if isinstance(value, FeedbackThresholds) else FeedbackThresholds.from_dict(value)
            elif key.endswith('_bands'):
                value = tuple(int(v) for v in value)
            values[key] = value

        return replace(cls(), **values).validate()


DEFAULT_CONFIG = ScoringConfig()


def load_config(path: str) -> ScoringConfig:
    """Load a ScoringConfig from a JSON file"""

    with open(path, 'r') as f:
        data = json.load(f)

    config = ScoringConfig.from_dict(data)
    logger.debug("Loaded scoring config from %s (%d overrides)", path, len(data))
    return config
