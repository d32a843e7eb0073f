"""
Domain constants: environment names, defaults, file naming.
"""

# =============================================================================
# Mode Switch
# =============================================================================
# golden=record pytest tests/...  → overwrite golden files
# anything else (or unset)        → compare against golden files

GOLDEN_ENV = "golden"
RECORD_VALUE = "record"

# =============================================================================
# Settings
# =============================================================================

SETTINGS_ENV = "GOLDEN_MATCH_CONFIG"
SETTINGS_SECTION = "golden"

# =============================================================================
# Diff / Temp Files
# =============================================================================

DEFAULT_DIFF_COMMAND = ("diff",)
DEFAULT_ENCODING = "utf-8"
TEMP_FILE_PREFIX = "actual"

DIFFER_EXTERNAL = "external"
DIFFER_DIFFLIB = "difflib"

# =============================================================================
# CI Detection
# =============================================================================
# GitHub Actions, GitLab CI, Jenkins, CircleCI, Travis, Buildkite,
# Azure Pipelines (TF_BUILD), AWS CodeBuild

CI_INDICATORS = (
    "CI",
    "GITHUB_ACTIONS",
    "GITLAB_CI",
    "JENKINS_URL",
    "CIRCLECI",
    "TRAVIS",
    "BUILDKITE",
    "TF_BUILD",
    "CODEBUILD_BUILD_ID",
)
