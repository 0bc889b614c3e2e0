import logging
import math

import pytest

from pantry_utils.ingredients.models import PantryItem
from pantry_utils.vision.detections import (
    NO_DETECTION_MESSAGE,
    Detection,
    DetectionResult,
    describe_detection_result,
    detections_from_predictions,
    format_confidence,
    process_detections,
)
from pantry_utils.vision.labels import ALLOWED_VISION_LABELS, CONFIDENCE_THRESHOLD


def test_threshold_is_inclusive():
    """Test that confidence exactly at the threshold is kept and just below is dropped."""
    result = process_detections(
        [Detection("apple", 0.4), Detection("banana", 0.399999)]
    )
    assert result.items == (PantryItem("apple", 0.8),)
    assert result.aggregate_confidence == pytest.approx(0.4)


def test_labels_are_lowercased_and_filtered():
    """Test that labels are lowercased and non-food classes are ignored."""
    result = process_detections(
        [
            Detection("Banana", 0.9),
            Detection("person", 0.99),
            Detection("Bell Pepper", 0.5),
            Detection("dining table", 0.8),
        ]
    )
    assert [item.name for item in result.items] == ["banana", "bell pepper"]
    assert result.aggregate_confidence == pytest.approx(0.7)


def test_quantity_proxy_is_rounded():
    """Test that quantity is confidence * 2 rounded half-up to two decimals."""
    result = process_detections(
        [Detection("egg", 0.7364), Detection("lime", 0.8125), Detection("kiwi", 1.0)]
    )
    assert [item.quantity for item in result.items] == [1.47, 1.63, 2.0]


def test_no_allowed_labels():
    """Test that confident detections outside the allow-list yield the empty result."""
    result = process_detections([Detection("car", 0.95), Detection("person", 0.4)])
    assert result == DetectionResult(items=(), aggregate_confidence=0.0)
    assert not result.detected


def test_empty_batch():
    """Test that an empty batch yields no items and zero confidence."""
    result = process_detections([])
    assert result.items == ()
    assert result.aggregate_confidence == 0


def test_duplicate_labels_are_kept():
    """Test that each surviving detection becomes its own item."""
    result = process_detections([Detection("apple", 0.9), Detection("apple", 0.5)])
    assert [item.name for item in result.items] == ["apple", "apple"]
    assert result.aggregate_confidence == pytest.approx(0.7)


@pytest.mark.parametrize("confidence", [math.nan, None, "high"])
def test_malformed_confidence_is_dropped(confidence):
    """Test that non-numeric or NaN confidences never raise."""
    result = process_detections([Detection("apple", confidence)])
    assert result.items == ()


def test_huge_finite_confidence_does_not_raise():
    """Test that a finite but out-of-range confidence still produces an item."""
    result = process_detections([Detection("apple", 1e30)])
    assert result.items == (PantryItem("apple", 2e30),)
    assert result.aggregate_confidence == 1e30
    assert describe_detection_result(result) == "Detected 1 item with 100% confidence."


def test_custom_threshold_and_labels():
    """Test overriding the threshold and allow-list."""
    detections = [Detection("apple", 0.3), Detection("plate", 0.9)]
    result = process_detections(
        detections, min_confidence=0.25, allowed_labels=frozenset({"apple", "plate"})
    )
    assert [item.name for item in result.items] == ["apple", "plate"]


def test_allow_list_defaults():
    """Test the default configuration values."""
    assert CONFIDENCE_THRESHOLD == 0.4
    assert len(ALLOWED_VISION_LABELS) == 33
    assert {"egg", "bread", "cheese", "bell pepper"} <= ALLOWED_VISION_LABELS
    assert all(label == label.lower() for label in ALLOWED_VISION_LABELS)


@pytest.mark.parametrize(
    "prediction, expected",
    [
        ({"class": "apple", "score": 0.9, "bbox": [0, 0, 10, 10]}, Detection("apple", 0.9)),
        ({"label": "egg", "confidence": "0.5"}, Detection("egg", 0.5)),
    ],
)
def test_detection_from_prediction(prediction, expected):
    """Test building detections from COCO-SSD style and plain mappings."""
    assert Detection.from_prediction(prediction) == expected


def test_detections_from_predictions_skips_malformed():
    """Test that malformed predictions are skipped rather than raising."""
    detections = detections_from_predictions(
        [
            {"class": "apple", "score": 0.9},
            {"class": "egg"},
            {"score": 0.4},
            {"label": "x", "score": "n/a"},
        ]
    )
    assert detections == [Detection("apple", 0.9)]


@pytest.mark.parametrize(
    "confidence, expected",
    [(0.0, 0), (0.734, 73), (0.125, 13), (0.999, 100), (1.2, 100)],
)
def test_format_confidence(confidence, expected):
    """Test percentage formatting of the aggregate confidence."""
    assert format_confidence(confidence) == expected


def test_describe_detection_result():
    """Test the user-facing status lines."""
    single = process_detections([Detection("egg", 0.8)])
    multiple = process_detections([Detection("egg", 0.8), Detection("lime", 0.6)])
    assert describe_detection_result(single) == "Detected 1 item with 80% confidence."
    assert describe_detection_result(multiple) == "Detected 2 items with 70% confidence."
    assert describe_detection_result(process_detections([])) == NO_DETECTION_MESSAGE


def test_process_detections_logs_batch_summary(caplog):
    """Test the debug summary logged for each detection batch."""
    with caplog.at_level(logging.DEBUG, logger="pantry_utils.vision.detections"):
        process_detections([Detection("egg", 0.9), Detection("egg", 0.1)])
    assert "Kept 1 of 2 detection(s) at confidence >= 0.4" in caplog.text
