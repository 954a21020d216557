import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
TEMPLATE_DIR = os.environ.get("FORMIT_TEMPLATE_DIR", os.path.join(BASE_DIR, "templates"))
FIELDSET_TEMPLATE = "fieldset.html"
FORM_TEMPLATE = "form.html"
FIELD_TEMPLATES = {
  "input": "fields/input.html",
  "textarea": "fields/textarea.html",
  "select": "fields/select.html",
  "button": "fields/button.html"
}
# RenderSettings.check() で事前に読み込むテンプレート
REQUIRED_TEMPLATES = [FIELDSET_TEMPLATE, FORM_TEMPLATE] + list(FIELD_TEMPLATES.values())
LOG_LEVEL = os.environ.get("FORMIT_LOG_LEVEL", "WARNING")
