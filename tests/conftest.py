from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from bytesize.core.format_options import FormatOptions


class LoaderStub:
    def __init__(self, options: FormatOptions | None = None) -> None:
        self.options = options or FormatOptions()
        self.calls: list[str | None] = []

    def load(self, env_path: str | None = None) -> FormatOptions:
        self.calls.append(env_path)
        return self.options


@pytest.fixture
def loader_stub() -> LoaderStub:
    return LoaderStub()


@pytest.fixture
def write_env_file(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    def _write(values: dict[str, str]) -> Path:
        env_file = tmp_path / "bytesize.env"
        text = "\n".join(f"{key}={value}" for key, value in values.items()) + "\n"
        env_file.write_text(text, encoding="utf-8")
        return env_file

    return _write
