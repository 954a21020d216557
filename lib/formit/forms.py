from formit import settings
from formit.elements import Element
from formit.fields import Field
from formit.fieldsets import FieldSet
from formit.shortcuts import render_template

class Form(Element):
  """
  A <form> holding fields and fieldsets in display order.

    form = Form("POST", "/login",
      FieldSet("account", CharField("username"), PasswordField("passwd")),
      SubmitButton(label="Login")
    )
    form.set_initials({"username": "taro"})
  """
  def __init__(self, method="POST", action="", *elements):
    super().__init__()
    if method.upper() not in ['GET', 'POST']:
      raise ValueError('Invalid method: {}'.format(method))
    self.method = method.upper()
    self.action = action
    self.elements = []
    for element in elements:
      self.add(element)

  def add(self, element):
    if not isinstance(element, (Field, FieldSet)):
      raise ValueError(f'{element!r} is not a field or fieldset')
    if isinstance(element, Field) and element.name and self.field(element.name).name:
      raise ValueError(f'{element.name} is already in form')
    self.elements.append(element)
    return self

  def fieldsets(self):
    return [e for e in self.elements if isinstance(e, FieldSet)]

  def fieldset(self, name):
    for fieldset in self.fieldsets():
      if fieldset.name == name:
        return fieldset
    return None

  def field(self, name):
    for element in self.elements:
      if isinstance(element, FieldSet):
        field = element.field(name)
        if field.name:
          return field
      elif element.name == name and name:
        return element
    return Field()

  def set_initials(self, initials):
    if initials.__class__ != dict:
      raise ValueError('initials must be dict')
    for key, value in initials.items():
      field = self.field(key)
      if not field.name:
        raise ValueError(f'{key} is not in fields')
      field.value = value
    return self

  def context(self):
    data = super().context()
    data.update({
      "method": self.method,
      "action": self.action,
      "elements": list(self.elements)
    })
    return data

  def render(self):
    return render_template(settings.FORM_TEMPLATE, self.context())

  def __html__(self):
    return self.render()
