class Element:
  """
  Markup metadata shared by fields, fieldsets and forms.

  classes and tags are ordered sets (dict keys), css and params are plain
  dicts. Every mutator returns the element itself so calls can be chained:

    FieldSet("address").add_class("row").add_css("margin", "0").disable()
  """
  def __init__(self):
    self.id = ""
    self.classes = {}
    self.tags = {}
    self.css = {}
    self.params = {}

  def set_id(self, id):
    self.id = id
    return self

  def add_class(self, class_name):
    self.classes[class_name] = None
    return self

  def remove_class(self, class_name):
    self.classes.pop(class_name, None)
    return self

  # tag: 値を持たない属性 (disabled, checked, required など)
  def add_tag(self, tag):
    self.tags[tag] = None
    return self

  def remove_tag(self, tag):
    self.tags.pop(tag, None)
    return self

  def disable(self):
    return self.add_tag("disabled")

  def enable(self):
    return self.remove_tag("disabled")

  def add_css(self, key, value):
    self.css[key] = value
    return self

  def remove_css(self, key):
    self.css.pop(key, None)
    return self

  def set_param(self, key, value):
    self.params[key] = value
    return self

  def remove_param(self, key):
    self.params.pop(key, None)
    return self

  def context(self):
    return {
      "classes": list(self.classes),
      "tags": list(self.tags),
      "css": dict(self.css),
      "id": self.id,
      "params": dict(self.params)
    }
