# tests/__init__.py
"""
Expose common test utilities so tests can import directly:
    from tests import make_pet, make_step2
"""

from .utils import BASELINE_SCORE, make_bundle_payload, make_pet, make_rule, make_step1, make_step2, make_step3

__all__ = ["BASELINE_SCORE", "make_pet", "make_rule", "make_step1", "make_step2", "make_step3", "make_bundle_payload"]
