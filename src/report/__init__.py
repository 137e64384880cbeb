"""Report module - Rule registry and aggregated reports.

This module provides:
- RULES: the thirteen evaluators in their fixed reporting order
- run_rules() to evaluate all or a subset of rules
- aggregate() and AuditSummary for pass/fail roll-ups
- Builders for the audit, validate and failure JSON documents

Example usage:
    >>> from src.report import build_audit_report, run_rules
    >>> results = run_rules(structure)
    >>> report = build_audit_report(structure, results, "phase1-structure/v2.json")
"""

from .lib import (
    RULE_TITLES,
    RULES,
    AuditSummary,
    RuleEvaluator,
    UnknownRuleError,
    aggregate,
    build_audit_report,
    build_error,
    build_validate_report,
    build_validation_failure,
    run_rules,
)

__all__ = [
    # Registry
    "RuleEvaluator",
    "RULES",
    "RULE_TITLES",
    "UnknownRuleError",
    "run_rules",
    # Aggregation
    "AuditSummary",
    "aggregate",
    # Report shapes
    "build_audit_report",
    "build_validate_report",
    "build_validation_failure",
    "build_error",
]
