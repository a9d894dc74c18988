import io

import pytest
from PIL import Image


@pytest.fixture
def png_bytes():
    out = io.BytesIO()
    Image.new("RGB", (40, 20), (0, 0, 0)).save(out, format="PNG")
    return out.getvalue()
