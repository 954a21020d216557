import os
import sys
import importlib.util
import pytest

SCRIPT = os.path.join(os.path.dirname(__file__), "..", "bin", "formit-render.py")
SAMPLE = os.path.join(os.path.dirname(__file__), "..", "sample", "forms", "login.json")

@pytest.fixture
def cli():
  spec = importlib.util.spec_from_file_location("formit_render", SCRIPT)
  module = importlib.util.module_from_spec(spec)
  spec.loader.exec_module(module)
  return module

def run(cli, monkeypatch, *args):
  monkeypatch.setattr(sys, "argv", ["formit-render.py", *args])
  with pytest.raises(SystemExit) as e:
    cli.main()
  return e.value.code

def test_check_succeeds(cli, monkeypatch, capsys):
  assert run(cli, monkeypatch, "--check") in (None, 0)
  assert "All templates loaded." in capsys.readouterr().out

def test_check_missing_template_dir(cli, monkeypatch, capsys, tmp_path):
  assert run(cli, monkeypatch, "--check", "-t", str(tmp_path / "nowhere")) == 1
  assert capsys.readouterr().err.startswith("Error: ")

def test_malformed_json(cli, monkeypatch, capsys, tmp_path):
  bad = tmp_path / "bad.json"
  bad.write_text("{not json")
  assert run(cli, monkeypatch, str(bad)) == 1
  err = capsys.readouterr().err
  assert err.startswith("Error: cannot read")
  assert "Traceback" not in err

def test_missing_file(cli, monkeypatch, capsys, tmp_path):
  assert run(cli, monkeypatch, str(tmp_path / "missing.json")) == 1
  assert capsys.readouterr().err.startswith("Error: cannot read")

def test_invalid_description(cli, monkeypatch, capsys, tmp_path):
  bad = tmp_path / "bad.json"
  bad.write_text('{"fields": [{"type": "file", "name": "x"}]}')
  assert run(cli, monkeypatch, str(bad)) == 1
  assert "Invalid field type" in capsys.readouterr().err

def test_render_to_file(cli, monkeypatch, tmp_path):
  out = tmp_path / "login.html"
  monkeypatch.setattr(sys, "argv", ["formit-render.py", "-o", str(out), SAMPLE])
  cli.main()
  html = out.read_text()
  assert html.startswith('<form method="POST" action="/accounts/login" id="login-form">')
  assert html.endswith("</form>\n")
