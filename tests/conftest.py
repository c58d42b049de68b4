import pytest

from transporte.logic.costo_minimo import TransporteProblem
from transporte.main import create_app


@pytest.fixture
def app(tmp_path):
    app = create_app({"TESTING": True, "LOG_FILE": str(tmp_path / "errors.log")})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def resolver():
    def _resolver(costos, oferta, demanda):
        problema = TransporteProblem(len(oferta), len(demanda))
        problema.cargar_datos(costos, oferta, demanda).balancear()
        return problema, problema.resolver()

    return _resolver
