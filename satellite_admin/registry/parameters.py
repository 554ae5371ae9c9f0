"""Parameter descriptors for admin operations.

A descriptor tells a renderer how to collect one positional argument of an
operation. Descriptors form a closed union discriminated on ``kind``:

    - ``TextInput``: free text input, with an HTML-like ``subtype``
    - ``Choice``: selection among a fixed list of options

Renderers switch on ``kind`` and enforce ``required`` before invoking the
operation; operation functions never re-validate their arguments.
"""

from enum import Enum
from typing import Annotated, Any, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class TextSubtype(str, Enum):
    """Kind of text input to render."""
    TEXT = "text"
    NUMBER = "number"
    EMAIL = "email"
    PASSWORD = "password"


class TextInput(BaseModel):
    """Text-like input."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    subtype: TextSubtype = Field(
        TextSubtype.TEXT,
        description="Input subtype (text, number, email, password)"
    )
    required: bool = Field(False, description="Value must be provided")


class ChoiceOption(BaseModel):
    """One selectable option."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Text shown to the operator")
    value: str = Field(..., description="Value passed to the operation")


class Choice(BaseModel):
    """Selection input, single or multiple."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["choice"] = "choice"
    multiple: bool = Field(False, description="More than one option may be selected")
    required: bool = Field(False, description="A selection must be made")
    options: Tuple[ChoiceOption, ...] = Field(
        (),
        description="Options in display order"
    )

    def option_values(self) -> List[str]:
        """Option values in display order."""
        return [option.value for option in self.options]


ParameterDescriptor = Annotated[Union[TextInput, Choice], Field(discriminator="kind")]

parameter_adapter: TypeAdapter = TypeAdapter(ParameterDescriptor)


def text(subtype: str = "text", required: bool = False) -> TextInput:
    """Shorthand for a TextInput descriptor."""
    return TextInput(subtype=TextSubtype(subtype), required=required)


def choice(
    options: List[Tuple[str, str]],
    multiple: bool = False,
    required: bool = False
) -> Choice:
    """Shorthand for a Choice descriptor built from (text, value) pairs."""
    return Choice(
        multiple=multiple,
        required=required,
        options=tuple(ChoiceOption(text=t, value=v) for t, v in options)
    )


def is_blank(value: Any) -> bool:
    """Whether a collected value counts as not provided."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False
