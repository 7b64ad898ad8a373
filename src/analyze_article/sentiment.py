"""Document sentiment labelling."""

from analyze_article.models import NEGATIVE, NEUTRAL, POSITIVE

POSITIVE_THRESHOLD = 0.1
NEGATIVE_THRESHOLD = -0.1


def sentiment_label(score: float) -> str:
    """Map a document sentiment score to positive / neutral / negative.

    The thresholds are exclusive: 0.1 and -0.1 are both neutral.
    """
    if score > POSITIVE_THRESHOLD:
        return POSITIVE
    if score < NEGATIVE_THRESHOLD:
        return NEGATIVE
    return NEUTRAL
