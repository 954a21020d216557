from formit import settings
from formit.elements import Element
from formit.shortcuts import render_template

class Field(Element):
  """
  A single form control.

  Field() with no name is the empty field returned by lookups that miss,
  check it with `field.name == ""` (or `not field.name`).
  """
  widget = "input"
  input_type = "text"

  def __init__(self, name="", label=None, value=None):
    super().__init__()
    if name.__class__ != str:
      raise ValueError('name must be str')
    self.name = name
    self.label = label
    self.value = value

  def markup_id(self):
    if self.id:
      return self.id
    if self.name:
      return f"id_{self.name}"
    return ""

  def context(self):
    data = super().context()
    data.update({
      "id": self.markup_id(),
      "name": self.name,
      "type": self.input_type,
      "label": self.label,
      "value": self.value
    })
    return data

  def render(self):
    return render_template(settings.FIELD_TEMPLATES[self.widget], self.context())

  def __html__(self):
    return self.render()

  def __repr__(self):
    return f"{self.__class__.__name__}(name={self.name!r})"

class CharField(Field):
  def __init__(self, name="", max_length=127, required=True, label=None, value=None):
    super().__init__(name, label=label, value=value)
    self.max_length = max_length
    self.required = required

  def context(self):
    data = super().context()
    if self.max_length is not None:
      data["params"] = {"maxlength": self.max_length, **data["params"]}
    if self.required and "required" not in data["tags"]:
      data["tags"].append("required")
    return data

class PasswordField(CharField):
  input_type = "password"

class EmailField(CharField):
  input_type = "email"

class HiddenField(Field):
  input_type = "hidden"

class TextAreaField(Field):
  widget = "textarea"

  def __init__(self, name="", rows=None, cols=None, required=False, label=None, value=None):
    super().__init__(name, label=label, value=value)
    if rows is not None:
      self.set_param("rows", rows)
    if cols is not None:
      self.set_param("cols", cols)
    if required:
      self.add_tag("required")

class CheckboxField(Field):
  input_type = "checkbox"

  def __init__(self, name="", checked=False, label=None, value="on"):
    super().__init__(name, label=label, value=value)
    if checked:
      self.check()

  def check(self):
    return self.add_tag("checked")

  def uncheck(self):
    return self.remove_tag("checked")

class SelectField(Field):
  widget = "select"

  def __init__(self, name="", choices=(), label=None, value=None):
    super().__init__(name, label=label, value=value)
    self.choices = []
    for choice in choices:
      if isinstance(choice, (tuple, list)):
        self.add_choice(*choice)
      else:
        self.add_choice(choice)

  def add_choice(self, value, label=None):
    self.choices.append((str(value), label if label is not None else str(value)))
    return self

  def context(self):
    data = super().context()
    selected = None if self.value is None else str(self.value)
    data["choices"] = [
      {"value": value, "label": label, "selected": value == selected}
      for value, label in self.choices
    ]
    return data

class SubmitButton(Field):
  widget = "button"
  input_type = "submit"

  def __init__(self, name="", label="Submit", value=None):
    super().__init__(name, label=label, value=value)
