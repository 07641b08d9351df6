from typing import Optional


class ParseError(ValueError):
  """Raised when text does not match the expression grammar"""

  def __init__(self, message: str, position: Optional[int] = None, token: Optional[str] = None):
    self.position = position
    self.token = token
    details = []
    if token is not None:
      details.append(f"token {token!r}")
    if position is not None:
      details.append(f"position {position}")
    if details:
      message = f"{message} ({', '.join(details)})"
    super().__init__(message)


class MissingVariableError(ValueError):
  """Raised when evaluation meets a variable the environment does not bind"""

  def __init__(self, name: str):
    self.name = name
    super().__init__(f"Variable {name} not found in environment")
