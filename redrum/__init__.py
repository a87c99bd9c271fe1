"""
Redrum -- SHA-256 Digest Cross-Analysis
========================================

Hashes a word, each of its characters, and the concatenation of the
per-character hashes, then lines the word's letters up against the
resulting digests.

Modules:
    - redrum.analyzers: Pure digest-analysis pipeline
    - redrum.core.engine: Orchestrator producing ScanResult envelopes
    - redrum.core.models: Pydantic data models
    - redrum.output: Console and report output
    - redrum.cli: Click-based command-line interface
"""

__version__ = "1.0.0"
__tool_name__ = "redrum"
