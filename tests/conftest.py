"""Shared test fixtures for cut profile geometry and quoting tests."""
import logging
import os
import pytest
from cutgeom.types import ArcSeg
from quote.scene import load_scene

FILES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "files")


@pytest.fixture(autouse=True)
def _reset_quote_logger():
    """Drop handlers bound to a test's captured streams by setup_logging."""
    yield
    logging.getLogger("quote").handlers.clear()


@pytest.fixture(scope="session")
def files_dir():
    """Directory holding the bundled sample profiles."""
    return FILES_DIR


@pytest.fixture(scope="session")
def rectangle():
    """5" x 3" rectangle of four line segments."""
    return load_scene(os.path.join(FILES_DIR, "Rectangle.json"))


@pytest.fixture(scope="session")
def extrude_arc():
    """2" x 1" rectangle whose east side bulges out as a half circle."""
    return load_scene(os.path.join(FILES_DIR, "ExtrudeCircularArc.json"))


@pytest.fixture(scope="session")
def cut_arc():
    """2" x 1" rectangle whose east side is cut in as a half circle."""
    return load_scene(os.path.join(FILES_DIR, "CutCircularArc.json"))


@pytest.fixture
def quarter_pts():
    """Point arena for a unit quarter circle about the origin."""
    return {0: (1.0, 0.0), 1: (0.0, 1.0)}


@pytest.fixture
def quarter_arc():
    """CCW quarter arc from (1, 0) to (0, 1), center at the origin."""
    return ArcSeg(0, 1, (0.0, 0.0), False)
