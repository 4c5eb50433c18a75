"""
Configuration constants for the scattergram statistics system.

This module contains all configuration values and constants used throughout
the fetch and aggregation pipeline. Centralizing these makes it easy to adjust
behavior when the remote service changes.
"""

# =============================================================================
# REMOTE SERVICE
# =============================================================================

# The student portal serves a small script blob that names the real API host.
# Everything else is fetched from that discovered host.
STUDENT_BASE_URL = "https://student.naviance.com/"

SITE_CONFIG_PATH = "/rewritten_config.js"
SITE_CONFIG_PREFIX = "window.REWRITTEN_CONFIG = "
SITE_CONFIG_SUFFIX = ";"

# Authenticated resource paths (relative to the discovered API host)
SCHOOLS_IM_THINKING_ABOUT_PATH = "/college/colleges-im-thinking-about"
SCATTERGRAM_SOURCES_PATH = "/college/scattergram"
COLLEGE_BY_UUID_PATH = "/college/uuid"
APPLICATION_STATISTICS_PATH = "/application-statistics/uuid"


# =============================================================================
# HTTP
# =============================================================================

# Seconds before a single request is abandoned. This is the only timeout
# policy in the system; there is no manual cancellation.
REQUEST_TIMEOUT = 30

USER_AGENT = "naviance-scattergram/1.0 (+requests)"

# Retries for the one-time site-config discovery. API calls never retry.
DISCOVERY_RETRIES = 3

# Maximum number of schools fetched at the same time
MAX_CONCURRENT_FETCHES = 16


# =============================================================================
# TOLERANCE WINDOW
# =============================================================================
# "Boxed" statistics only count applicants whose profile sits close to the
# student's own. The window is intentionally asymmetric:
#   - test score: 20 points below to 30 points above
#   - GPA:        0.21 below to 0.11 above
# Both ends are inclusive. These are fixed, not user-configurable.

TEST_SCORE_BELOW = 20
TEST_SCORE_ABOVE = 30

GPA_BELOW = 0.21
GPA_ABOVE = 0.11

# GPA bounds are floats like 3.7 - 0.21; compare with a little slack so the
# boundary value itself stays inside the window.
GPA_EPSILON = 1e-9


# =============================================================================
# ENVIRONMENT
# =============================================================================

# Bearer token for the student API (also read from a .env file)
KEY_ENV_VAR = "KEY"

LOG_LEVEL_ENV_VAR = "SCATTERGRAM_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
