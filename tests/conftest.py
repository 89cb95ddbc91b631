"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

# Never fall back to a real database from a test run
os.environ.setdefault("POSTGRES_CONN", "sqlite://")

from tender_service.database import create_db_and_tables, get_session  # noqa: E402
from tender_service.models import OrganizationType, TenderServiceType, BidAuthorType  # noqa: E402
from tender_service.repositories import (  # noqa: E402
    BidRepository,
    OrganizationRepository,
    ResponsibilityRepository,
    TenderRepository,
    UserRepository,
)
from tender_service.services import (  # noqa: E402
    AuthorizationGate,
    BidService,
    OrganizationService,
    TenderService,
    UserService,
)


@pytest.fixture
def engine():
    """In-memory SQLite shared by every connection of the test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def users(session):
    return UserService(UserRepository(session))


@pytest.fixture
def organizations(session):
    return OrganizationService(OrganizationRepository(session))


@pytest.fixture
def gate(session):
    return AuthorizationGate(ResponsibilityRepository(session))


@pytest.fixture
def tenders(session, gate):
    return TenderService(TenderRepository(session), gate)


@pytest.fixture
def bids(session, gate, tenders):
    return BidService(BidRepository(session), gate, tenders)


@pytest.fixture
def organization(organizations):
    return organizations.create_organization("Acme", "Builds things", OrganizationType.LLC)


@pytest.fixture
def user(users):
    return users.get_by_id(users.create_user("alice", "Alice", "Smith"))


@pytest.fixture
def outsider(users):
    return users.get_by_id(users.create_user("mallory", "Mallory", "Jones"))


@pytest.fixture
def responsible(gate, organization, user):
    """alice is responsible for Acme."""
    return gate.create_responsibility(organization.id, user.id)


@pytest.fixture
def tender(tenders, organization, user, responsible):
    return tenders.create(
        name="Bridge",
        description="Build a bridge",
        service_type=TenderServiceType.CONSTRUCTION,
        organization_id=organization.id,
        creator_username=user.username,
    )


@pytest.fixture
def bid(bids, tender, user):
    return bids.create(
        name="Offer",
        description="Cheap and fast",
        tender_id=tender.id,
        author_type=BidAuthorType.USER,
        author_id=user.id,
    )


@pytest.fixture
def client(engine):
    """FastAPI test client bound to the in-memory database."""
    from tender_service.main import app

    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    # Not used as a context manager: lifespan would create tables on the configured database
    yield TestClient(app)
    app.dependency_overrides.clear()
