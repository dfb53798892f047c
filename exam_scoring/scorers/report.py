"""
Score Report - output shape shared by every scorer

Also holds the error taxonomy:
- MalformedInputError: reference/submission missing required fields
- UnknownQuestionTypeError: no scorer registered for a question type
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List


class MalformedInputError(ValueError):
    """Reference or submission is missing a required field or has the wrong shape"""

    def __init__(self, question_type: str, field_name: str, problem: str = "is required"):
        self.question_type = question_type
        self.field_name = field_name
        super().__init__(f"{question_type}: '{field_name}' {problem}")


class UnknownQuestionTypeError(ValueError):
    """Raised by the scorer registry for an unregistered question type"""


# Word statuses for read-aloud style alignment
GOOD = "good"
AVERAGE = "average"
BAD = "bad"


@dataclass(frozen=True)
class WordAnalysisEntry:
    """One reference word and how well the transcript covered it"""
    word: str
    status: str  # good / average / bad


@dataclass
class ScoreReport:
    """Complete scoring output for one attempt"""
    score: float
    max_score: float
    subscores: Dict[str, float] = field(default_factory=dict)
    detail: List[Any] = field(default_factory=list)
    feedback: List[str] = field(default_factory=list)
    # Counts and ratios used by feedback (word counts, similarity, ...)
    metrics: Dict[str, float] = field(default_factory=dict)
    question_type: str = ""

    @property
    def ratio(self) -> float:
        return self.score / self.max_score if self.max_score else 0.0

    def to_dict(self, precision: int = 1) -> Dict[str, Any]:
        """Plain dict with floats rounded for storage"""

        def _round(value):
            return round(value, precision) if isinstance(value, float) else value

        detail = []
        for item in self.detail:
            if isinstance(item, WordAnalysisEntry):
                detail.append(asdict(item))
            elif isinstance(item, dict):
                detail.append({k: _round(v) for k, v in item.items()})
            else:
                detail.append(item)

        return {
            'questionType': self.question_type,
            'score': _round(float(self.score)),
            'maxScore': _round(float(self.max_score)),
            'subscores': {k: _round(float(v)) for k, v in self.subscores.items()},
            'metrics': {k: _round(v) for k, v in self.metrics.items()},
            'detail': detail,
            'feedback': list(self.feedback),
        }
