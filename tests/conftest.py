from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write, write_bytes
from tests.infrastructure.testing_utils import PNG_BYTES, RecordingReporter

@pytest.fixture
def site(tmp_path: Path) -> Path:
    """Небольшой сайт: страница, стили с @import, скрипт, картинка."""
    root = tmp_path
    write(
        root / "index.html",
        "<html><head>"
        "<link rel=\"stylesheet\" href=\"css/a.css\">"
        "<script src=\"js/app.js\"></script>"
        "</head><body><img src=\"img/logo.png\" alt=\"Logo\"></body></html>",
    )
    write(root / "css" / "a.css", "@import url(\"b.css\");")
    write(root / "css" / "b.css", "body { color: red; }")
    write(root / "js" / "app.js", "var x=1;")
    write_bytes(root / "img" / "logo.png", PNG_BYTES)
    return root

@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()
