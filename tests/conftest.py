import pytest
import respx


@pytest.fixture(autouse=True)
def _isolate_global_respx_router():
    # Routes added via respx.post(...) inside a @respx.mock(...) decorated test
    # land on the global default router; clear them so they don't leak across tests.
    yield
    respx.mock.clear()
    respx.mock.reset()
