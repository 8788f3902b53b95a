import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if getattr(h, "_hull_handler", False)]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


@pytest.fixture
def square_with_center():
    return [(0.0, 0.0), (0.0, 2.0), (2.0, 2.0), (2.0, 0.0), (1.0, 1.0)]


@pytest.fixture
def points_file(tmp_path):
    def write(text, name="points.txt"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return write
