"""Analysis engine: metrics, aggregation and the analyzer process entry point.

Kept import-light so ``python -m csharp_review.engine`` and the bundled
zipapp start quickly; import submodules directly.
"""
