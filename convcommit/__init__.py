"""
Conventional Commit

Compose Conventional Commits messages interactively or from flags, then commit them.
"""

__version__ = "1.0.0"

# Centralized commit types - single source of truth
# Used by: commit/message.py (validation), prompts/collector.py (menu), output (colors)
COMMIT_TYPES = {
    'feat': 'A new feature',
    'fix': 'A bug fix',
    'docs': 'Documentation only changes',
    'style': 'Formatting, whitespace, no code change',
    'refactor': 'Code restructuring without behavior change',
    'perf': 'Performance improvement',
    'test': 'Adding or updating tests',
    'build': 'Build system or external dependency changes',
    'ci': 'CI/CD configuration changes',
    'chore': 'Maintenance tasks, tooling',
    'revert': 'Reverts a previous commit',
}

# Ordered list of type names, as shown in the interactive menu
COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
