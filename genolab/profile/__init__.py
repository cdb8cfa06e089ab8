"""
Profile matrices over aligned sequences and their consensus strings.
"""

from genolab.profile.matrix import (
    build_profile,
    consensus,
    ProfileMatrix,
)

__all__ = [
    "build_profile",
    "consensus",
    "ProfileMatrix",
]
