"""
Test Fakes Module

Document builder and dependency inference providers for rule tests.
No parser or compiler is involved.
"""

from tests.fakes.fake_document import FakeDocument
from tests.fakes.fake_inference import ReferenceScanningProvider, StaticInferenceProvider, dependencies_by_name

__all__ = [
    "FakeDocument",
    "StaticInferenceProvider",
    "ReferenceScanningProvider",
    "dependencies_by_name",
]
