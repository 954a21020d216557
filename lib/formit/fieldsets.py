import logging
from formit import settings
from formit.elements import Element
from formit.fields import Field
from formit.shortcuts import render_template

logger = logging.getLogger(__name__)

class FieldSet(Element):
  """
  A named, ordered group of fields rendered as a <fieldset>.

  Fields keep the order they were given in, and can be looked up by name.
  Every mutator returns the fieldset itself:

    fs = FieldSet("login", CharField("username"), PasswordField("passwd"))
    fs.set_id("login").add_class("row").disable()
    html = fs.render()
  """
  def __init__(self, name, *fields):
    super().__init__()
    self._name = name
    self._fields = list(fields)
    self.field_map = {}
    for i, field in enumerate(self._fields):
      # 名前のないフィールド (ボタンなど) は検索対象外
      if not field.name:
        continue
      if field.name in self.field_map:
        # 後のフィールドが優先される
        logger.warning("fieldset %s: duplicate field name %s", name, field.name)
      self.field_map[field.name] = i

  @property
  def name(self):
    return self._name

  def field(self, name):
    index = self.field_map.get(name)
    if index is None:
      return Field()
    return self._fields[index]

  def fields(self):
    return tuple(self._fields)

  def add_field(self, field):
    if field.name and field.name in self.field_map:
      raise ValueError(f'{field.name} is already in fieldset {self._name}')
    self._fields.append(field)
    if field.name:
      self.field_map[field.name] = len(self._fields) - 1
    return self

  def context(self):
    data = super().context()
    data["fields"] = list(self._fields)
    return data

  def render(self):
    return render_template(settings.FIELDSET_TEMPLATE, self.context())

  def __html__(self):
    return self.render()

  def __repr__(self):
    return f"FieldSet(name={self._name!r}, fields={[f.name for f in self._fields]!r})"
