"""
conai

Conventionalize free-form commit messages with an OpenAI chat model.
"""

__version__ = "1.0.0"

# Centralized commit types - single source of truth for the system prompt
COMMIT_TYPES = {
    'feat': 'a new feature is introduced with the changes',
    'fix': 'a bug fix has occurred',
    'chore': "initial commit, changes that do not relate to a fix or feature and don't modify src or test files (for example updating dependencies)",
    'refactor': 'refactored code that neither fixes a bug nor adds a feature',
    'docs': 'any update to documentation such as the README or other markdown files',
    'style': 'changes that do not affect the meaning of the code, likely related to code formatting such as white-space, missing semi-colons, and so on.',
    'test': 'including new or correcting previous tests',
    'perf': 'performance improvements',
    'ci': 'continuous integration related',
    'build': 'changes that affect the build system or external dependencies',
    'revert': 'reverts a previous commit',
}
