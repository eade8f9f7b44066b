"""Application constants that never change across environments.

These are fixed business rules of the travel records domain. Anything that
may vary between dev/staging/prod belongs in config.py instead.
"""

# ===== Popularity =====
POPULARITY_LIMIT = 10  # score must exceed this to become HIGH
POPULARITY_LOW = "LOW"
POPULARITY_HIGH = "HIGH"
INITIAL_SCORE = 0
SCORE_STEP = 1

# ===== Input Handling =====
# Upstream clients serialize missing strings as the literal "null".
NULL_LITERAL = "null"

# ===== Identifiers =====
FIRST_ID = 1

# ===== Media Naming =====
MEDIA_EXTENSION = ".jpg"
MEDIA_NAME_SEPARATOR = "_"
MEDIA_STAGE_SEGMENT = 2
MEDIA_MIN_SEGMENTS = 4

# Staged uploads are named {prefix}{random}{ext}
MEDIA_STAGING_PREFIX = "upload_"
