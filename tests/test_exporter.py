"""Tests for the generator and writer."""

from pathlib import Path

import pytest

from folder_module.errors import FileSystemError
from folder_module.exporter import generate_module, relative_import, render_export, write_module
from folder_module.models import GeneratedModule, Mapping


def test_relative_import_same_directory():
    assert relative_import(Path("widgets/a.js"), Path("widgets/index.js")) == "./a.js"


def test_relative_import_other_directory():
    assert relative_import(Path("widgets/a.js"), Path("out/index.js")) == "./../widgets/a.js"
    assert relative_import(Path("src/ui/a.js"), Path("src/index.js")) == "./ui/a.js"


def test_relative_import_absolute_source(tmp_path):
    source = tmp_path / "widgets" / "a.js"
    out_file = tmp_path / "index.js"
    assert relative_import(source, out_file) == "./widgets/a.js"


def test_relative_import_mixed_relative_and_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert relative_import(tmp_path / "w" / "a.js", Path("w/index.js")) == "./a.js"
    assert relative_import(Path("w/a.js"), tmp_path / "w" / "index.js") == "./a.js"


def test_render_export():
    mapping = Mapping(Path("widgets/my-file.js"), "myFile")
    assert render_export(mapping, Path("widgets/index.js")) == (
        'export { default as myFile } from "./my-file.js";'
    )


def test_render_export_escapes_quotes():
    mapping = Mapping(Path('w/a"b.js'), "ab")
    assert render_export(mapping, Path("w/index.js")) == (
        'export { default as ab } from "./a\\"b.js";'
    )


def test_generate_module_keeps_order():
    out_file = Path("w/index.js")
    mappings = [Mapping(Path("w/z.js"), "z"), Mapping(Path("w/a.js"), "a")]

    module = generate_module(mappings, out_file)

    assert module.out_file == out_file
    assert module.exports == 2
    assert module.text.splitlines() == [
        'export { default as z } from "./z.js";',
        'export { default as a } from "./a.js";',
    ]
    assert module.content.endswith('"./a.js";\n')


def test_generate_module_empty():
    module = generate_module([], Path("index.js"))
    assert module.text == ""
    assert module.content == "\n"


def test_write_module_creates_parents(tmp_path):
    out_file = tmp_path / "deep" / "er" / "index.js"
    module = GeneratedModule(out_file=out_file, text="export { default as a } from \"./a.js\";")

    assert write_module(module) == out_file
    assert out_file.read_text(encoding="utf-8") == module.text + "\n"


def test_write_module_truncates(tmp_path):
    out_file = tmp_path / "index.js"
    out_file.write_text("old content that is much longer than the new one\n" * 10)

    write_module(GeneratedModule(out_file=out_file, text="x"))
    assert out_file.read_text() == "x\n"


def test_write_module_unwritable(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    module = GeneratedModule(out_file=blocker / "index.js", text="")

    with pytest.raises(FileSystemError):
        write_module(module)


def test_write_module_encode_failure_keeps_previous(tmp_path):
    out_file = tmp_path / "index.js"
    out_file.write_text("previous\n")
    module = GeneratedModule(out_file=out_file, text='export { default as a } from "./\ud800";')

    with pytest.raises(FileSystemError):
        write_module(module)
    assert out_file.read_text() == "previous\n"
