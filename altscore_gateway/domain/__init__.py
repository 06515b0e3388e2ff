"""Score engine and FAQ matcher - the library surface UI layers bind to"""

from altscore_gateway.domain.scoring import compute_score
from altscore_gateway.domain.faq import find_best_answer

__all__ = ["compute_score", "find_best_answer"]
