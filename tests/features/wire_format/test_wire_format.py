"""BDD test file for wire-format encoding features.

This file loads scenarios from feature files and generates test functions.
Step definitions are in conftest.py.
"""

from pytest_bdd import scenarios

# Load all scenarios from feature files
# This generates test functions that pytest can discover
scenarios("metric_encoding.feature")
scenarios("event_encoding.feature")
scenarios("service_check_encoding.feature")
