import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def depot_bed():
    from depot.domain import depot

    bed = DomainFixture(depot)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(depot_bed):
    with depot_bed.domain_context():
        yield

    from depot.store import reset_store

    reset_store()


@pytest.fixture()
def store():
    from depot.store.memory_adapter import MemoryStore

    return MemoryStore()
