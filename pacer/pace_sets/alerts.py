"""User-facing alerts: a message plus optional choices."""

from typing import Literal

from pydantic import BaseModel, Field

ChoiceStyle = Literal["default", "cancel", "destructive"]


class AlertChoice(BaseModel):
    label: str
    action: str
    style: ChoiceStyle = "default"


class Alert(BaseModel):
    title: str
    message: str
    choices: list[AlertChoice] = Field(default_factory=list)

    def action_labels(self) -> list[str]:
        return [choice.label for choice in self.choices]


CANCEL_CHOICE = AlertChoice(label="Cancel", action="cancel", style="cancel")


def overwrite_confirmation(name: str) -> Alert:
    return Alert(
        title="Name already exists",
        message=f'A pace set named "{name}" already exists. Replace it?',
        choices=[
            CANCEL_CHOICE,
            AlertChoice(label="Replace", action="overwrite", style="destructive"),
        ],
    )


def delete_confirmation(name: str) -> Alert:
    return Alert(
        title="Confirm delete",
        message=f'Do you really want to delete the pace set "{name}"?',
        choices=[
            CANCEL_CHOICE,
            AlertChoice(label="Delete", action="delete", style="destructive"),
        ],
    )


def error_alert(message: str, title: str = "Error") -> Alert:
    return Alert(title=title, message=message)


def calculation_errors(errors: list[str]) -> Alert:
    """One alert for every discipline error of a calculation pass."""
    return Alert(title="Check your entries", message="\n".join(errors))


def success_alert(message: str) -> Alert:
    return Alert(title="Success", message=message)
