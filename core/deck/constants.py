"""
Deck Constants

Fixed identifiers and tunables for the card-draw engine in one place.
"""

# ---- Selection ----

STARTER_CATEGORY_ID = "starter"  # Floor selection whenever the set would be empty


# ---- Persistence ----

PREFERENCES_KEY = "nextcard-categories"  # Namespace of the persisted selection slot


# ---- Presentation ----

ROTATION_PERIOD = 4  # Background rotation slots cycled through on each draw
