"""Post-processing of object-detection output into pantry items."""

from .detections import (
    Detection,
    DetectionResult,
    describe_detection_result,
    detections_from_predictions,
    format_confidence,
    process_detections,
)
from .labels import ALLOWED_VISION_LABELS, CONFIDENCE_THRESHOLD

__all__ = [
    "ALLOWED_VISION_LABELS",
    "CONFIDENCE_THRESHOLD",
    "Detection",
    "DetectionResult",
    "describe_detection_result",
    "detections_from_predictions",
    "format_confidence",
    "process_detections",
]
