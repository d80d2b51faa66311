import pytest

from farmstand import create_app


@pytest.fixture
def app(tmp_path):
    app = create_app({
        'TESTING': True,
        'DATABASE': str(tmp_path / 'farmstand-test.db'),
    })
    yield app
    app.extensions['farmstand.repository'].database.close()


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def repository(app):
    return app.extensions['farmstand.repository']


@pytest.fixture
def apple():
    """Formulaire valide pour un produit."""
    return {"name": "Apple", "price": "1.5", "category": "fruit"}
