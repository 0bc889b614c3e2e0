"""Turn raw object-detection predictions into pantry items."""

import dataclasses
import logging
import math
from typing import AbstractSet, Any, Iterable, List, Mapping, Sequence, Tuple

import numpy as np

from pantry_utils.ingredients.models import PantryItem
from pantry_utils.ingredients.number_utils import round_half_up
from pantry_utils.vision.labels import (
    ALLOWED_VISION_LABELS,
    CONFIDENCE_THRESHOLD,
    QUANTITY_PER_CONFIDENCE,
    QUANTITY_PRECISION,
)

logger = logging.getLogger(__name__)

NO_DETECTION_MESSAGE = "We could not confidently detect ingredients. Try another angle."


@dataclasses.dataclass(frozen=True)
class Detection:
    """One labeled prediction from the vision classifier."""

    label: str
    confidence: float

    @classmethod
    def from_prediction(cls, prediction: Mapping[str, Any]) -> "Detection":
        """Build a Detection from a raw prediction mapping.

        Accepts COCO-SSD style keys (``class``/``score``) as well as
        ``label``/``confidence``. Bounding boxes and other keys are ignored.

        Raises:
            KeyError: If the label or the score is missing.
            ValueError: If the score is not a number.
        """
        label = prediction["class"] if "class" in prediction else prediction["label"]
        score = prediction["score"] if "score" in prediction else prediction["confidence"]
        return cls(label=str(label), confidence=float(score))


@dataclasses.dataclass(frozen=True)
class DetectionResult:
    items: Tuple[PantryItem, ...]
    aggregate_confidence: float

    @property
    def detected(self) -> bool:
        return bool(self.items)


def detections_from_predictions(predictions: Iterable[Mapping[str, Any]]) -> List[Detection]:
    """Convert raw prediction mappings, skipping the ones that are malformed."""
    detections = []
    for prediction in predictions:
        try:
            detections.append(Detection.from_prediction(prediction))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed prediction {prediction!r}: {e}")
    return detections


def process_detections(
    detections: Sequence[Detection],
    min_confidence: float = CONFIDENCE_THRESHOLD,
    allowed_labels: AbstractSet[str] = ALLOWED_VISION_LABELS,
) -> DetectionResult:
    """Filter one batch of detections and turn the survivors into pantry items.

    Detections below ``min_confidence`` are dropped, labels are lowercased
    and only labels in ``allowed_labels`` are kept. Each survivor becomes a
    PantryItem whose quantity is ``confidence * 2`` rounded to two decimals,
    a proxy rather than a real count. Duplicate labels are kept; merging
    into the pantry deduplicates them.

    Args:
        detections: One completed batch of classifier output.
        min_confidence: Inclusive confidence cutoff.
        allowed_labels: Lowercase labels eligible to become pantry items.

    Returns:
        The items plus the mean confidence of the surviving detections. An
        empty result (no items, confidence 0) means nothing was detected
        confidently; it is not an error.
    """
    survivors = []
    for detection in detections:
        if not _is_confident(detection, min_confidence):
            continue
        label = detection.label.lower()
        if label in allowed_labels:
            survivors.append((label, float(detection.confidence)))

    logger.debug(
        f"Kept {len(survivors)} of {len(detections)} detection(s) "
        f"at confidence >= {min_confidence}"
    )
    if not survivors:
        return DetectionResult(items=(), aggregate_confidence=0.0)

    items = tuple(
        PantryItem(
            name=label,
            quantity=round_half_up(confidence * QUANTITY_PER_CONFIDENCE, QUANTITY_PRECISION),
        )
        for label, confidence in survivors
    )
    aggregate_confidence = float(np.mean([confidence for _, confidence in survivors]))
    return DetectionResult(items=items, aggregate_confidence=aggregate_confidence)


def _is_confident(detection: Detection, min_confidence: float) -> bool:
    """Check that a detection has a string label and a finite confidence above the cutoff."""
    if not isinstance(detection.label, str):
        return False
    try:
        confidence = float(detection.confidence)
    except (TypeError, ValueError):
        return False
    return math.isfinite(confidence) and confidence >= min_confidence


def format_confidence(confidence: float) -> int:
    """Express a confidence as a whole percentage, capped at 100."""
    return int(round_half_up(min(confidence * 100, 100), 0))


def describe_detection_result(result: DetectionResult) -> str:
    """Build the status line shown to the user after a detection batch."""
    if not result.detected:
        return NO_DETECTION_MESSAGE
    count = len(result.items)
    plural = "s" if count > 1 else ""
    return (
        f"Detected {count} item{plural} with "
        f"{format_confidence(result.aggregate_confidence)}% confidence."
    )
