class FormitError(Exception):
  pass

class RenderError(FormitError):
  """Raised when a template cannot be loaded or fails to render."""
  def __init__(self, template, cause):
    self.template = template
    self.cause = cause
    super().__init__(f"failed to render template `{template}`: {cause}")
