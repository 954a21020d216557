import logging
import jinja2
from markupsafe import Markup
from formit import settings
from formit.exceptions import RenderError

logger = logging.getLogger(__name__)

def css_style(css):
  return "; ".join(f"{key}: {value}" for key, value in css.items())

class RenderSettings:
  templates_dir = None
  env = None

  @classmethod
  def get_env(cls):
    if cls.env is None:
      if cls.templates_dir is None:
        cls.templates_dir = settings.TEMPLATE_DIR
      logger.debug("loading templates from %s", cls.templates_dir)
      cls.env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(cls.templates_dir),
        autoescape=True,
        undefined=jinja2.StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True
      )
      cls.env.filters['css'] = css_style
    return cls.env

  @classmethod
  def reset(cls, templates_dir=None):
    cls.templates_dir = templates_dir
    cls.env = None

  @classmethod
  def get_template(cls, name):
    try:
      return cls.get_env().get_template(name)
    except jinja2.TemplateError as e:
      logger.error("cannot load template %s: %s", name, e)
      raise RenderError(name, e) from e

  @classmethod
  def check(cls, names=None):
    # 起動時に全テンプレートを読み込んで、欠けているものがあればここで失敗させる
    if names is None:
      names = settings.REQUIRED_TEMPLATES
    for name in names:
      cls.get_template(name)
    return True

def render_template(name, context):
  template = RenderSettings.get_template(name)
  try:
    return Markup(template.render(**context))
  except jinja2.TemplateError as e:
    logger.error("cannot render template %s: %s", name, e)
    raise RenderError(name, e) from e
