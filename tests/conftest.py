"""
Pytest configuration and fixtures for the API tests.

Provides shared fixtures for:
- An in-memory SQLite engine injected into the application
- A TestClient bound to that application
- Sample data factories for categories, organizations, events and registrations
"""

import pytest
from datetime import date, datetime, time, timedelta
from sqlalchemy import create_engine, event, func
from sqlalchemy.pool import StaticPool

from charity_events.application import create_app
from charity_events.database import Base, build_session_factory
from charity_events.models.category_model import Category
from charity_events.models.organization_model import Organization
from charity_events.models.event_model import Event
from charity_events.models.registration_model import Registration


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture(scope='function')
def test_db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )

    # Enforce foreign keys the way the production store does
    def _fk_pragma_on_connect(dbapi_con, con_record):
        dbapi_con.execute('pragma foreign_keys=ON')

    event.listen(engine, 'connect', _fk_pragma_on_connect)

    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope='function')
def session_factory(test_db_engine):
    return build_session_factory(test_db_engine)


@pytest.fixture
def count_rows(session_factory):
    """Count rows of a model through a fresh session."""
    def _count(model):
        with session_factory() as session:
            return session.query(func.count(model.id)).scalar()
    return _count


@pytest.fixture
def fetch_event(session_factory):
    """Load an event's columns through a fresh session, or None."""
    def _fetch(event_id):
        with session_factory() as session:
            found = session.get(Event, event_id)
            if found is None:
                return None
            return {column.name: getattr(found, column.name) for column in Event.__table__.columns}
    return _fetch


# ============================================================================
# Sample Data Factories
# ============================================================================

@pytest.fixture
def reference_data(session_factory):
    """Seed categories and organizations; return their ids by name."""
    with session_factory() as session:
        categories = [Category(name=name) for name in ('Gala Dinner', 'Charity Run', 'Auction')]
        organizations = [Organization(name=name) for name in ('Hope Foundation', 'River Rescue')]
        session.add_all(categories + organizations)
        session.commit()
        return {
            'categories': {c.name: c.id for c in categories},
            'organizations': {o.name: o.id for o in organizations},
        }


@pytest.fixture
def sample_event_data(reference_data):
    """Factory for a valid event request body."""
    def _create(**overrides):
        data = {
            'title': 'Spring Charity Run',
            'description': '5k fun run',
            'full_description': 'A 5k run along the river to fund flood relief.',
            'event_date': (date.today() + timedelta(days=10)).isoformat(),
            'event_time': '09:30:00',
            'location': 'Riverside Park, Brisbane',
            'venue_details': 'Meet at the north gate',
            'category_id': reference_data['categories']['Charity Run'],
            'organization_id': reference_data['organizations']['River Rescue'],
        }
        data.update(overrides)
        return data
    return _create


@pytest.fixture
def sample_event(session_factory, reference_data):
    """Factory for Event rows written straight to the database; returns the id."""
    def _create(
        title='Autumn Gala',
        days_from_today=7,
        location='City Hall, Sydney',
        category='Gala Dinner',
        organization='Hope Foundation',
        is_active=True,
        **kwargs
    ):
        with session_factory() as session:
            new_event = Event(
                title=title,
                event_date=date.today() + timedelta(days=days_from_today),
                event_time=time(18, 0),
                location=location,
                category_id=reference_data['categories'][category],
                organization_id=reference_data['organizations'][organization],
                is_active=is_active,
                **kwargs
            )
            session.add(new_event)
            session.commit()
            return new_event.id
    return _create


@pytest.fixture
def sample_registration(session_factory):
    """Factory for Registration rows with an explicit registration date."""
    def _create(event_id, full_name='Alex Chen', registration_date=None, ticket_count=1):
        with session_factory() as session:
            registration = Registration(
                event_id=event_id,
                full_name=full_name,
                email=f"{full_name.lower().replace(' ', '.')}@example.com",
                phone='0400 000 000',
                ticket_count=ticket_count,
                registration_date=registration_date or datetime(2025, 1, 1, 12, 0),
            )
            session.add(registration)
            session.commit()
            return registration.id
    return _create


# ============================================================================
# FastAPI Test Client Fixture
# ============================================================================

@pytest.fixture
def test_client(test_db_engine):
    """Create a test client around an application bound to the test engine."""
    from fastapi.testclient import TestClient

    app = create_app(engine=test_db_engine)
    with TestClient(app) as client:
        yield client
