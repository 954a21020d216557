from formit.exceptions import FormitError, RenderError
from formit.fields import (
  Field, CharField, PasswordField, EmailField, HiddenField,
  TextAreaField, CheckboxField, SelectField, SubmitButton
)
from formit.fieldsets import FieldSet
from formit.forms import Form

__version__ = "1.0.0"
