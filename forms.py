from flask import current_app
from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SubmitField
from wtforms.validators import StopValidation, ValidationError

from models.journal import EntryType


class Present:
    """Require the field to be in the submitted data.

    Unlike ``InputRequired`` an empty string is accepted. Repeated keys and
    non-string values are not.
    """

    field_flags = {"required": True}

    def __init__(self, message=None):
        self.message = message

    def __call__(self, form, field):
        if not field.raw_data:
            raise StopValidation(self.message or "This field is missing.")
        if len(field.raw_data) != 1 or not isinstance(field.raw_data[0], str):
            raise StopValidation(self.message or "This field must be a single string.")


class JournalEntryForm(FlaskForm):
    """Form for creating a journal entry."""

    date = StringField("Date", validators=[Present()])
    type = StringField("Type", validators=[Present()])
    text = TextAreaField("Entry", validators=[Present()])
    submit = SubmitField("Save")

    def validate_type(self, type):
        if not current_app.config.get("JOURNAL_STRICT_TYPES"):
            return
        if type.data not in EntryType.values():
            raise ValidationError(
                f"Type must be one of: {', '.join(EntryType.values())}."
            )
