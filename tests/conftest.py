import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture()
def php_tree(tmp_path):
    """Arbol de fuentes con anidamiento, extensiones mixtas y un archivo ajeno."""
    (tmp_path / "a.php").write_text("<?php echo 1;\n", encoding="utf-8")
    (tmp_path / "b.PHP").write_text("<?php $b = 2;\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("no es php", encoding="utf-8")
    (tmp_path / ".php").write_text("<?php", encoding="utf-8")
    nested = tmp_path / "sub" / "deeper"
    nested.mkdir(parents=True)
    (tmp_path / "sub" / "c.php").write_text("<?php\n$c = [1, 2];\n", encoding="utf-8")
    (nested / "d.php").write_text("<html><?= $d ?></html>\n", encoding="utf-8")
    return tmp_path
