import pytest
from copy import deepcopy
from human_id import generate_id
from common import global_config

# Markers for slow, and nondeterministic tests
slow_test = pytest.mark.slow
nondeterministic_test = pytest.mark.nondeterministic


class TestTemplate:
    """Base class for test suites; exposes a private copy of the global config."""

    @pytest.fixture(autouse=True)
    def setup(self):
        running_on = global_config.running_on

        print(
            f"🧪 Setting up \033[34m{type(self).__name__}\033[0m "
            f"from {__name__} on {running_on} machine..."
        )

        # Tests may mutate their copy freely without touching the singleton
        config = deepcopy(global_config.to_dict())
        config["session_id"] = f"{type(self).__name__}-@-{generate_id()}"
        config["test"] = True

        self.config = config
        self.session_id = config["session_id"]

    @pytest.fixture(scope="session", autouse=True)
    def session_teardown(self, request):
        yield
        print("\n🏁 All tests have completed running.")
