"""Coordinators - Orchestration layer connecting file I/O with translation services."""

from .translation_pipeline import PipelineReport, PipelineState, TranslationPipeline

__all__ = [
    "TranslationPipeline",
    "PipelineReport",
    "PipelineState",
]
