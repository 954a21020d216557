from formit.fields import (
  CharField, PasswordField, EmailField, HiddenField,
  TextAreaField, CheckboxField, SelectField, SubmitButton
)
from formit.fieldsets import FieldSet
from formit.forms import Form

FIELD_TYPES = {
  "char": CharField,
  "password": PasswordField,
  "email": EmailField,
  "hidden": HiddenField,
  "textarea": TextAreaField,
  "checkbox": CheckboxField,
  "select": SelectField,
  "submit": SubmitButton
}

# 例
# {
#   "method": "POST",
#   "action": "/accounts/login",
#   "fieldsets": [
#     {
#       "name": "account",
#       "classes": ["row"],
#       "fields": [
#         {"type": "char", "name": "username", "max_length": 255},
#         {"type": "password", "name": "passwd"}
#       ]
#     }
#   ],
#   "fields": [{"type": "submit", "label": "Login"}]
# }

def _apply_metadata(element, description):
  if description.get("id"):
    element.set_id(description["id"])
  for class_name in description.get("classes", []):
    element.add_class(class_name)
  for tag in description.get("tags", []):
    element.add_tag(tag)
  for key, value in description.get("css", {}).items():
    element.add_css(key, value)
  for key, value in description.get("params", {}).items():
    element.set_param(key, value)
  if description.get("disabled"):
    element.disable()
  return element

def build_field(description):
  if description.__class__ != dict:
    raise ValueError('field description must be dict')
  options = {
    key: value for key, value in description.items()
    if key not in ["type", "id", "classes", "tags", "css", "params", "disabled"]
  }
  field_type = description.get("type", "char")
  if field_type not in FIELD_TYPES:
    raise ValueError('Invalid field type: {}'.format(field_type))
  try:
    field = FIELD_TYPES[field_type](**options)
  except TypeError as e:
    raise ValueError(f'Invalid options for {field_type} field: {e}') from e
  return _apply_metadata(field, description)

def build_fieldset(description):
  if description.__class__ != dict:
    raise ValueError('fieldset description must be dict')
  if "name" not in description:
    raise ValueError('fieldset name is required')
  fields = [build_field(field) for field in description.get("fields", [])]
  return _apply_metadata(FieldSet(description["name"], *fields), description)

def build_form(description):
  if description.__class__ != dict:
    raise ValueError('form description must be dict')
  form = Form(description.get("method", "POST"), description.get("action", ""))
  for fieldset in description.get("fieldsets", []):
    form.add(build_fieldset(fieldset))
  for field in description.get("fields", []):
    form.add(build_field(field))
  _apply_metadata(form, description)
  if description.get("initials"):
    form.set_initials(description["initials"])
  return form
