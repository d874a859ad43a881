"""
git-msg

AI-assisted commit messages for uncommitted git changes.
"""

__version__ = "1.0.0"

# Conventional Commits types offered to the models
# Used by: prompts/builder.py (style guide), cli/utils.py (cleanup), output (TYPE_STYLES keys)
COMMIT_TYPES = {
    'feat': 'A new feature',
    'fix': 'A bug fix',
    'docs': 'Documentation changes',
    'style': "Changes that don't affect code functionality (formatting, etc.)",
    'refactor': 'Code changes that neither fix bugs nor add features',
    'perf': 'Performance improvements',
    'test': 'Adding or correcting tests',
    'chore': 'Changes to build process, dependencies, etc.',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
