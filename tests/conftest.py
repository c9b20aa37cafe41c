import pathlib
import sys

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))


@pytest.fixture
def lang_dir(tmp_path):
    """Directory with ``en`` and ``fa`` language files, as a prefix string."""
    (tmp_path / "en.ini").write_text("greeting = Hello\nfarewell = Bye\n", encoding="utf-8")
    (tmp_path / "fa.ini").write_text("greeting = سلام\nfarewell = خداحافظ\n", encoding="utf-8")
    return str(tmp_path) + "/"
