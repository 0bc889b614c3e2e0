"""Tunable constants for turning vision detections into pantry items."""

# Detections below this confidence are treated as noise (0.4 itself is kept)
CONFIDENCE_THRESHOLD = 0.4

# Detected items get ``confidence * QUANTITY_PER_CONFIDENCE`` as a proxy quantity
QUANTITY_PER_CONFIDENCE = 2

# Decimal places kept on the proxy quantity
QUANTITY_PRECISION = 2

# Classifier labels that may become pantry items; everything else the
# detector knows about (people, furniture, vehicles...) is ignored.
ALLOWED_VISION_LABELS = frozenset(
    {
        # Produce
        "apple",
        "banana",
        "orange",
        "carrot",
        "broccoli",
        "cucumber",
        "tomato",
        "potato",
        "lemon",
        "lime",
        "pepper",
        "bell pepper",
        "cabbage",
        "lettuce",
        "onion",
        "garlic",
        "zucchini",
        "eggplant",
        "avocado",
        "mushroom",
        "grapes",
        "kiwi",
        "strawberry",
        "pineapple",
        # Dairy, eggs and bakery
        "egg",
        "cheese",
        "yogurt",
        "bread",
        # Prepared food and kitchenware
        "sandwich",
        "pizza",
        "cake",
        "donut",
        "bowl",
    }
)
