"""Canonical rule ID registry.

Single source of truth for every rule ID the engine knows about: the
detector rules behind each suggestion and the syntax diagnostics emitted
by the tree provider.

Structure:
  PUBLIC_RULE_IDS       - stable, supported, safe for downstream consumption
  EXPERIMENTAL_RULE_IDS - unstable, may change or be removed
  DEPRECATED_RULE_IDS   - scheduled for removal, do not add new usage
  ALL_RULE_IDS          - union of all buckets (internal use only)
"""

from __future__ import annotations

# ── Syntax diagnostics (public) ─────────────────────────────────────
SYN_MISSING_001 = "SYN_MISSING_001"
SYN_UNEXPECTED_001 = "SYN_UNEXPECTED_001"

# ── Basic / style (public) ──────────────────────────────────────────
STY_LONG_METHOD_001 = "STY_LONG_METHOD_001"
STY_MISSING_DOC_001 = "STY_MISSING_DOC_001"
STY_ASYNC_SUFFIX_001 = "STY_ASYNC_SUFFIX_001"
STY_LARGE_CLASS_001 = "STY_LARGE_CLASS_001"
STY_COMPLEXITY_001 = "STY_COMPLEXITY_001"

# ── Security (public) ───────────────────────────────────────────────
SEC_SQL_INJECTION_001 = "SEC_SQL_INJECTION_001"
SEC_HARDCODED_SECRET_001 = "SEC_HARDCODED_SECRET_001"
SEC_SWALLOWED_EXCEPTION_001 = "SEC_SWALLOWED_EXCEPTION_001"
SEC_UNSAFE_FILE_OP_001 = "SEC_UNSAFE_FILE_OP_001"
SEC_WEAK_RANDOM_001 = "SEC_WEAK_RANDOM_001"

# ── Performance (public) ────────────────────────────────────────────
PERF_STRING_CONCAT_LOOP_001 = "PERF_STRING_CONCAT_LOOP_001"
PERF_TOLIST_COUNT_001 = "PERF_TOLIST_COUNT_001"
PERF_DEFERRED_QUERY_001 = "PERF_DEFERRED_QUERY_001"
PERF_STRING_FORMAT_001 = "PERF_STRING_FORMAT_001"
PERF_CONFIGURE_AWAIT_001 = "PERF_CONFIGURE_AWAIT_001"
PERF_LINQ_CHAIN_001 = "PERF_LINQ_CHAIN_001"

# ── Query optimization (public) ─────────────────────────────────────
LINQ_COUNT_ANY_001 = "LINQ_COUNT_ANY_001"
LINQ_WHERE_COUNT_001 = "LINQ_WHERE_COUNT_001"
LINQ_WHERE_ANY_001 = "LINQ_WHERE_ANY_001"
LINQ_WHERE_FIRST_001 = "LINQ_WHERE_FIRST_001"
LINQ_IDENTITY_SELECT_001 = "LINQ_IDENTITY_SELECT_001"
LINQ_ORDERBY_FIRST_001 = "LINQ_ORDERBY_FIRST_001"
LINQ_TOLIST_WHERE_001 = "LINQ_TOLIST_WHERE_001"
LINQ_COMPLEX_QUERY_001 = "LINQ_COMPLEX_QUERY_001"

# ── Buckets ─────────────────────────────────────────────────────────

PUBLIC_RULE_IDS: list[str] = sorted([
    # Syntax
    SYN_MISSING_001,
    SYN_UNEXPECTED_001,
    # Style
    STY_LONG_METHOD_001,
    STY_MISSING_DOC_001,
    STY_ASYNC_SUFFIX_001,
    STY_LARGE_CLASS_001,
    STY_COMPLEXITY_001,
    # Security
    SEC_SQL_INJECTION_001,
    SEC_HARDCODED_SECRET_001,
    SEC_SWALLOWED_EXCEPTION_001,
    SEC_UNSAFE_FILE_OP_001,
    SEC_WEAK_RANDOM_001,
    # Performance
    PERF_STRING_CONCAT_LOOP_001,
    PERF_TOLIST_COUNT_001,
    PERF_DEFERRED_QUERY_001,
    PERF_STRING_FORMAT_001,
    PERF_CONFIGURE_AWAIT_001,
    PERF_LINQ_CHAIN_001,
    # Query optimization
    LINQ_COUNT_ANY_001,
    LINQ_WHERE_COUNT_001,
    LINQ_WHERE_ANY_001,
    LINQ_WHERE_FIRST_001,
    LINQ_IDENTITY_SELECT_001,
    LINQ_ORDERBY_FIRST_001,
    LINQ_TOLIST_WHERE_001,
    LINQ_COMPLEX_QUERY_001,
])

EXPERIMENTAL_RULE_IDS: list[str] = sorted([
    # Add experimental rules here as they're developed
])

DEPRECATED_RULE_IDS: list[str] = sorted([
    # Add deprecated rules here before removal
])

# Rule IDs reported as diagnostics rather than suggestions.
DIAGNOSTIC_RULE_IDS: frozenset[str] = frozenset({SYN_MISSING_001, SYN_UNEXPECTED_001})

# Union of all buckets (internal use only)
ALL_RULE_IDS: list[str] = sorted(set(
    PUBLIC_RULE_IDS
    + EXPERIMENTAL_RULE_IDS
    + DEPRECATED_RULE_IDS
))


def _assert_rule_registry_invariants() -> None:
    """Fail fast on invariant violations.

    Called at import time so CI and local runs catch issues immediately.
    """
    import re

    # Multi-segment IDs like PERF_STRING_CONCAT_LOOP_001
    rule_re = re.compile(r"^[A-Z]{2,4}_[A-Z][A-Z0-9_]*_[0-9]{3}$")

    def _check_bucket(name: str, ids: list[str]) -> None:
        if ids != sorted(ids):
            raise AssertionError(f"{name} must be sorted")
        if len(ids) != len(set(ids)):
            raise AssertionError(f"{name} must contain unique IDs")
        bad = [x for x in ids if not rule_re.match(x)]
        if bad:
            raise AssertionError(f"{name} contains invalid rule IDs: {bad}")

    _check_bucket("PUBLIC_RULE_IDS", PUBLIC_RULE_IDS)
    _check_bucket("EXPERIMENTAL_RULE_IDS", EXPERIMENTAL_RULE_IDS)
    _check_bucket("DEPRECATED_RULE_IDS", DEPRECATED_RULE_IDS)
    _check_bucket("ALL_RULE_IDS", ALL_RULE_IDS)

    # Buckets must be disjoint.
    pub = set(PUBLIC_RULE_IDS)
    exp = set(EXPERIMENTAL_RULE_IDS)
    dep = set(DEPRECATED_RULE_IDS)
    overlap = (pub & exp) | (pub & dep) | (exp & dep)
    if overlap:
        raise AssertionError(
            f"Rule ID buckets must be disjoint; overlaps: {sorted(overlap)}"
        )

    # ALL must be exact union.
    union = pub | exp | dep
    if set(ALL_RULE_IDS) != union:
        raise AssertionError(
            "ALL_RULE_IDS must equal union(PUBLIC, EXPERIMENTAL, DEPRECATED)"
        )

    if not DIAGNOSTIC_RULE_IDS <= union:
        raise AssertionError("DIAGNOSTIC_RULE_IDS must be registered in a bucket")


_assert_rule_registry_invariants()
