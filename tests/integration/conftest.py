"""Integration test configuration.

Integration tests run the whole application in-process. The database is
replaced by fakes, so no external services are needed.
"""

import pytest


pytestmark = pytest.mark.integration
