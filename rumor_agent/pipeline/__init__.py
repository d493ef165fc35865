"""End-to-end rumor pipeline wiring."""

from .rumor_pipeline import RumorPipeline

__all__ = ["RumorPipeline"]
