"""Cascading filtering for configuration issues."""

from typing import List

from .models import ConfigIssue


# Cascade level constants
FATAL = 0  # Unreadable file or schema errors - nothing downstream is meaningful
CRITICAL = 1  # Broken dimensions, references or coordinates - hides bounds/coverage checks
HIGH = 2  # Bounds and coverage problems
MEDIUM = 3  # Value constraints (multipliers, weights, counts)
LOW = 4  # Minor problems


def filter_cascading_issues(
    issues: List[ConfigIssue],
    max_issues: int = 5
) -> List[ConfigIssue]:
    """
    Filter out cascading issues based on hierarchy.

    Filtering rules:
    - Level 0 (FATAL) present → Show ONLY Level 0 issues
    - Level 1 (CRITICAL) present → Show Level 1 + Level 3 + Level 4
    - Otherwise → Show all issues

    Args:
        issues: List of configuration issues to filter
        max_issues: Maximum number of issues to return (default 5)

    Returns:
        Filtered list of issues, limited to max_issues
    """
    if not issues:
        return issues

    # Group issues by cascade level
    by_level: dict[int, List[ConfigIssue]] = {}
    for issue in issues:
        by_level.setdefault(issue.cascade_level, []).append(issue)

    if FATAL in by_level:
        result = by_level[FATAL]

    # Bounds and coverage are computed against dimensions and references
    # that are already known to be broken
    elif CRITICAL in by_level:
        result = [i for i in issues if i.cascade_level != HIGH]

    else:
        result = issues.copy()

    if len(result) > max_issues:
        kept = result[:max_issues - 1]
        num_hidden = len(result) - len(kept)

        kept.append(ConfigIssue(
            code="ADDITIONAL_ISSUES",
            message=f"... and {num_hidden} more issue{'s' if num_hidden > 1 else ''}. Fix the above first.",
            cascade_level=result[0].cascade_level
        ))
        return kept

    return result
