import pytest
from markupsafe import Markup
from formit.shortcuts import RenderSettings

class FakeField:
  def __init__(self, name, html=None):
    self.name = name
    self.html = html if html is not None else f'<input name="{name}">'
  def render(self):
    return Markup(self.html)
  def __html__(self):
    return self.render()

@pytest.fixture(autouse=True)
def reset_templates():
  RenderSettings.reset()
  yield
  RenderSettings.reset()

@pytest.fixture
def fake_field():
  return FakeField

@pytest.fixture
def template_dir(tmp_path):
  """Empty template directory the registry is pointed at."""
  RenderSettings.reset(str(tmp_path))
  return tmp_path
