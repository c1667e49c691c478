from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE = """\
* household ledger
+ 3000 @Alice #Salary ~Bank>Checking :transfer [2024/06/01 09:00]
$ 200 @Alice #Food>Groceries ~Cash [6/1]

- 50 @Alice;Bob #Food>Groceries ~Bank>Checking ?weekly shop :card [6/3]
- 12.50 @Bob #Food>Snacks ~Cash ?chips :cash [6/3 13:15]
- 8 #Food ~Cash [2024/06/04 20:00]
$ 100 #Transport ~Bank
"""


@pytest.fixture
def sample_lines() -> list[str]:
    return SAMPLE.splitlines()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "data.bext"
    path.write_text(SAMPLE, encoding="utf-8")
    return path
