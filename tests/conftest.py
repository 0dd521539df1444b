"""
Pytest configuration for funcimage tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE, default "default")
- Shared coordinate strategies
"""

import os

from hypothesis import settings, strategies as st

from funcimage.core import Point


settings.register_profile(
    "default",
    print_blob=True,
)

# CI profile: more examples, no deadline on slow runners
settings.register_profile(
    "ci",
    print_blob=True,
    max_examples=500,
    deadline=None,
)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


coordinates = st.floats(
    allow_nan=False,
    allow_infinity=False,
    min_value=-1e6,
    max_value=1e6,
)

points = st.builds(Point, coordinates, coordinates)
