import re

from gamevault import utils


def test_export_filename_format():
    assert re.fullmatch(r"game-collection-\d{4}-\d{2}-\d{2}\.csv", utils.export_filename("game-collection"))


def test_read_text_file_strips_bom(tmp_path):
    path = tmp_path / "upload.csv"
    path.write_bytes("Title\nZelda".encode("utf-8-sig"))
    assert utils.read_text_file(path) == "Title\nZelda"


def test_read_text_file_falls_back_to_latin1(tmp_path):
    path = tmp_path / "upload.csv"
    path.write_bytes("Éditeur".encode("latin-1"))
    assert utils.read_text_file(path) == "Éditeur"


def test_read_text_file_missing(tmp_path):
    assert utils.read_text_file(tmp_path / "nope.csv") is None
