import pytest
from PIL import Image


@pytest.fixture
def image_file(tmp_path):
    def _write(image: Image.Image, name="image.png"):
        path = tmp_path / name
        image.save(path)
        return path

    return _write
