import pytest

from coordgen.config import ValidationMode
from coordgen.core.domain.interfaces.layout_engine import LayoutEngine
from coordgen.core.services.coordinate_service import CoordinateService


class RecordingEngine(LayoutEngine):
    """Deterministic stand-in for the layout engine that remembers its calls."""

    def __init__(self):
        self.calls = []

    def get_coordinates(self, n_atoms, atoms, n_bonds, bonds, coords):
        self.calls.append((n_atoms, atoms.copy(), n_bonds, bonds.copy()))
        for idx in range(n_atoms):
            coords[2 * idx] = 1.5 * idx
            coords[2 * idx + 1] = -0.25 * float(atoms[idx])


@pytest.fixture
def engine():
    return RecordingEngine()


@pytest.fixture
def strict_service(engine):
    return CoordinateService(engine=engine, mode=ValidationMode.STRICT)


@pytest.fixture
def trusted_service(engine):
    return CoordinateService(engine=engine, mode=ValidationMode.TRUSTED)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv("COORDGEN_VALIDATION_MODE", raising=False)
    monkeypatch.delenv("COORDGEN_LIBRARY", raising=False)
